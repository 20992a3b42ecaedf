"""Bookmarks and abuse reports."""
import logging

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.exceptions import NotFoundException
from app.database import upsert, utcnow
from app.models.book import Book
from app.models.bookmark import Bookmark
from app.models.report import BookReport
from app.schemas.library import BookmarkSave, ReportCreate

logger = logging.getLogger(__name__)


async def _ensure_book(db: AsyncSession, book_id: str) -> None:
    result = await db.execute(select(Book.book_id).where(Book.book_id == book_id))
    if result.scalar_one_or_none() is None:
        raise NotFoundException("Book not found")


async def get_bookmark(db: AsyncSession, player_id: str, book_id: str) -> Bookmark | None:
    result = await db.execute(
        select(Bookmark)
        .where(Bookmark.player_id == player_id, Bookmark.book_id == book_id)
        .execution_options(populate_existing=True)
    )
    return result.scalar_one_or_none()


async def save_bookmark(db: AsyncSession, payload: BookmarkSave) -> Bookmark:
    """Remember the player's page in a book (one bookmark per book)."""
    await _ensure_book(db, payload.book_id)

    now = utcnow()
    await upsert(
        db,
        Bookmark,
        {"player_id": payload.player_id, "book_id": payload.book_id, "page": payload.page, "updated_at": now},
        index_elements=("player_id", "book_id"),
        update={"page": payload.page, "updated_at": now},
    )
    await db.commit()
    return await get_bookmark(db, payload.player_id, payload.book_id)


async def file_report(db: AsyncSession, book_id: str, payload: ReportCreate) -> BookReport:
    """Append an abuse report to a book."""
    await _ensure_book(db, book_id)

    report = BookReport(
        book_id=book_id,
        player_id=payload.player_id,
        player_name=payload.player_name,
        reason=payload.reason,
    )
    db.add(report)
    await db.commit()

    logger.warning(f"Book {book_id} reported by player {payload.player_id}")
    return report
