"""Upvote ledger: one upvote per player per book."""
import logging

from sqlalchemy import select, update
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.exceptions import BadRequestException, NotFoundException
from app.database import insert_if_absent
from app.models.book import Book
from app.models.book_vote import BookVote

logger = logging.getLogger(__name__)

SUPPORTED_VOTE_TYPES = ("up",)


async def has_voted(db: AsyncSession, player_id: str, book_id: str) -> bool:
    """Check voter membership; an unknown book simply has no voters."""
    result = await db.execute(
        select(BookVote.id).where(BookVote.book_id == book_id, BookVote.player_id == player_id)
    )
    return result.scalar_one_or_none() is not None


async def _current_upvotes(db: AsyncSession, book_id: str) -> int | None:
    result = await db.execute(select(Book.upvotes).where(Book.book_id == book_id))
    return result.scalar_one_or_none()


async def cast_vote(db: AsyncSession, player_id: str, book_id: str, vote_type: str) -> int:
    """Add the player to the voter set and bump ``upvotes`` once.

    Repeat votes are no-ops; the unique (book, player) key makes the
    membership insert atomic under concurrent requests.

    Returns:
        int: Upvotes after the call
    """
    if vote_type not in SUPPORTED_VOTE_TYPES:
        raise BadRequestException("Invalid vote type")

    if await _current_upvotes(db, book_id) is None:
        raise NotFoundException("Book not found")

    inserted = await insert_if_absent(
        db,
        BookVote,
        {"book_id": book_id, "player_id": player_id},
        index_elements=("book_id", "player_id"),
    )
    if inserted:
        await db.execute(
            update(Book)
            .where(Book.book_id == book_id)
            .values(upvotes=Book.upvotes + 1)
            .execution_options(synchronize_session=False)
        )
        logger.info(f"Player {player_id} upvoted book {book_id}")

    await db.commit()
    return await _current_upvotes(db, book_id) or 0
