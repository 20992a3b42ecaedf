"""Leaderboard rankings derived from books, comments, read logs and ledgers."""
from sqlalchemy import desc, distinct, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.config import settings
from app.models.activity_log import ReadLog
from app.models.book import Book
from app.models.comment import BookComment
from app.models.player import PlaytimeEntry, XpEntry
from app.schemas.leaderboard import (
    BooksReadRow,
    BooksWrittenRow,
    PlaytimeRow,
    PopularAuthorRow,
    ReviewerRow,
    XpRow,
)

UNKNOWN_USERNAME = "Unknown"

# Board names as exposed under /api/leaderboard/{board}
MOST_BOOKS_READ = "most-books-read"
TOP_REVIEWERS = "top-reviewers"
BOOKS_WRITTEN = "books-written"
MOST_POPULAR_AUTHOR = "most-popular-author"


async def most_books_read(db: AsyncSession, limit: int | None = None) -> list[BooksReadRow]:
    """Players by number of distinct books they have read."""
    books_read = func.count(distinct(ReadLog.book_id)).label("books_read")
    result = await db.execute(
        select(ReadLog.player_id, books_read, XpEntry.username)
        .outerjoin(XpEntry, XpEntry.player_id == ReadLog.player_id)
        .group_by(ReadLog.player_id, XpEntry.username)
        .order_by(desc(books_read), ReadLog.player_id)
        .limit(limit or settings.leaderboard_size)
    )
    return [
        BooksReadRow(player_id=player_id, username=username or UNKNOWN_USERNAME, books_read=count)
        for player_id, count, username in result.all()
    ]


async def top_reviewers(db: AsyncSession, limit: int | None = None) -> list[ReviewerRow]:
    """Players by number of comments across all books."""
    review_count = func.count(BookComment.id).label("review_count")
    result = await db.execute(
        select(BookComment.player_id, func.max(BookComment.username), review_count)
        .group_by(BookComment.player_id)
        .order_by(desc(review_count), BookComment.player_id)
        .limit(limit or settings.leaderboard_size)
    )
    return [
        ReviewerRow(player_id=player_id, username=username or UNKNOWN_USERNAME, review_count=count)
        for player_id, username, count in result.all()
    ]


async def books_written(db: AsyncSession, limit: int | None = None) -> list[BooksWrittenRow]:
    """Players by number of books (drafts included) they own."""
    written = func.count(Book.book_id).label("books_written")
    result = await db.execute(
        select(Book.player_id, written, XpEntry.username)
        .outerjoin(XpEntry, XpEntry.player_id == Book.player_id)
        .group_by(Book.player_id, XpEntry.username)
        .order_by(desc(written), Book.player_id)
        .limit(limit or settings.leaderboard_size)
    )
    return [
        BooksWrittenRow(player_id=player_id, username=username or UNKNOWN_USERNAME, books_written=count)
        for player_id, count, username in result.all()
    ]


async def most_popular_author(db: AsyncSession, limit: int | None = None) -> list[PopularAuthorRow]:
    """Players by total upvotes over their published books."""
    total = func.sum(Book.upvotes).label("total_upvotes")
    result = await db.execute(
        select(Book.player_id, total, XpEntry.username)
        .outerjoin(XpEntry, XpEntry.player_id == Book.player_id)
        .where(Book.published.is_(True))
        .group_by(Book.player_id, XpEntry.username)
        .order_by(desc(total), Book.player_id)
        .limit(limit or settings.leaderboard_size)
    )
    return [
        PopularAuthorRow(player_id=player_id, username=username or UNKNOWN_USERNAME, total_upvotes=upvotes or 0)
        for player_id, upvotes, username in result.all()
    ]


async def xp_leaderboard(db: AsyncSession, limit: int | None = None) -> list[XpRow]:
    result = await db.execute(
        select(XpEntry)
        .order_by(XpEntry.xp.desc(), XpEntry.player_id)
        .limit(limit or settings.leaderboard_size)
        .execution_options(populate_existing=True)
    )
    return [XpRow.model_validate(entry) for entry in result.scalars().all()]


async def playtime_leaderboard(db: AsyncSession, limit: int | None = None) -> list[PlaytimeRow]:
    result = await db.execute(
        select(PlaytimeEntry)
        .order_by(PlaytimeEntry.minutes.desc(), PlaytimeEntry.player_id)
        .limit(limit or settings.leaderboard_size)
        .execution_options(populate_existing=True)
    )
    return [PlaytimeRow.model_validate(entry) for entry in result.scalars().all()]
