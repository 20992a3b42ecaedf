"""Comment ledger: one comment per player per book, ranked by likes."""
import logging

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.config import settings
from app.core.exceptions import BadRequestException, ForbiddenException, NotFoundException
from app.database import insert_if_absent, utcnow
from app.models.book import Book
from app.models.comment import BookComment
from app.schemas.comment import CommentCreate, CommentReaction

logger = logging.getLogger(__name__)


def rank_comments(comments: list[BookComment]) -> list[BookComment]:
    """Most liked first; ties go to the newest comment."""
    return sorted(
        comments,
        key=lambda c: (len(c.likes or []), c.created_at, c.id),
        reverse=True,
    )


async def _ensure_book(db: AsyncSession, book_id: str) -> None:
    result = await db.execute(select(Book.book_id).where(Book.book_id == book_id))
    if result.scalar_one_or_none() is None:
        raise NotFoundException("Book not found")


async def list_comments(db: AsyncSession, book_id: str) -> list[BookComment]:
    await _ensure_book(db, book_id)
    result = await db.execute(
        select(BookComment)
        .where(BookComment.book_id == book_id)
        .execution_options(populate_existing=True)
    )
    return rank_comments(list(result.scalars().all()))


async def add_comment(db: AsyncSession, book_id: str, payload: CommentCreate) -> list[BookComment]:
    """Append the player's comment, seeding their own like.

    Raises:
        ForbiddenException: The player already commented on this book
    """
    await _ensure_book(db, book_id)

    text = payload.text.strip()
    if not text:
        raise BadRequestException("Comment text is required")
    if len(text) > settings.max_comment_length:
        raise BadRequestException(f"Comment must be at most {settings.max_comment_length} characters")

    inserted = await insert_if_absent(
        db,
        BookComment,
        {
            "book_id": book_id,
            "player_id": payload.player_id,
            "username": payload.username,
            "text": text,
            "likes": [payload.player_id],
            "dislikes": [],
            "created_at": utcnow(),
        },
        index_elements=("book_id", "player_id"),
    )
    if not inserted:
        raise ForbiddenException("You have already commented on this book")

    await db.commit()
    logger.info(f"Player {payload.player_id} commented on book {book_id}")
    return await list_comments(db, book_id)


async def react_to_comment(
    db: AsyncSession,
    book_id: str,
    comment_id: int,
    payload: CommentReaction,
) -> list[BookComment]:
    """Toggle a like or dislike; a player holds at most one of the two."""
    await _ensure_book(db, book_id)

    result = await db.execute(
        select(BookComment).where(BookComment.id == comment_id, BookComment.book_id == book_id)
    )
    comment = result.scalar_one_or_none()
    if not comment:
        raise NotFoundException("Comment not found")

    likes = [p for p in comment.likes or [] if p != payload.player_id]
    dislikes = [p for p in comment.dislikes or [] if p != payload.player_id]
    already = payload.player_id in (comment.likes if payload.reaction == "like" else comment.dislikes)

    if not already:
        if payload.reaction == "like":
            likes.append(payload.player_id)
        else:
            dislikes.append(payload.player_id)

    # JSON columns only track reassignment
    comment.likes = likes
    comment.dislikes = dislikes
    await db.commit()

    return await list_comments(db, book_id)
