"""Daily view/read dedup, XP ledger and playtime."""
import logging
import math

from sqlalchemy import select, update
from sqlalchemy.ext.asyncio import AsyncSession

from app.config import settings
from app.core.exceptions import NotFoundException
from app.database import insert_if_absent, upsert, utcnow
from app.models.activity_log import ReadLog, ViewLog
from app.models.book import Book
from app.models.player import PlaytimeEntry, XpEntry
from app.schemas.engagement import PlaytimeUpdate

logger = logging.getLogger(__name__)


def utc_today() -> str:
    """Dedup day key, YYYY-MM-DD in UTC."""
    return utcnow().date().isoformat()


async def record_view(
    db: AsyncSession,
    player_id: str,
    book_id: str,
    day: str | None = None,
) -> tuple[bool, int]:
    """Count at most one view per player, book and day.

    Returns:
        tuple: (duplicate flag, current view count)
    """
    day = day or utc_today()

    result = await db.execute(select(Book.views).where(Book.book_id == book_id))
    if result.scalar_one_or_none() is None:
        raise NotFoundException("Book not found")

    inserted = await insert_if_absent(
        db,
        ViewLog,
        {"player_id": player_id, "book_id": book_id, "date": day},
        index_elements=("player_id", "book_id", "date"),
    )
    if inserted:
        await db.execute(
            update(Book)
            .where(Book.book_id == book_id)
            .values(views=Book.views + 1)
            .execution_options(synchronize_session=False)
        )
    await db.commit()

    result = await db.execute(select(Book.views).where(Book.book_id == book_id))
    return not inserted, result.scalar_one()


async def _increment_xp(db: AsyncSession, player_id: str, username: str, amount: int) -> None:
    await upsert(
        db,
        XpEntry,
        {"player_id": player_id, "username": username, "xp": amount},
        index_elements=("player_id",),
        update={"xp": XpEntry.xp + amount, "username": username, "updated_at": utcnow()},
    )


async def get_xp(db: AsyncSession, player_id: str) -> XpEntry | None:
    result = await db.execute(
        select(XpEntry)
        .where(XpEntry.player_id == player_id)
        .execution_options(populate_existing=True)
    )
    return result.scalar_one_or_none()


async def award_xp(db: AsyncSession, player_id: str, username: str, amount: float) -> int:
    """Add ``floor(amount)`` XP and record the latest username.

    Returns:
        int: The player's XP total
    """
    points = math.floor(amount)
    await _increment_xp(db, player_id, username, points)
    await db.commit()

    entry = await get_xp(db, player_id)
    logger.info(f"Awarded {points} XP to player {player_id}")
    return entry.xp if entry else 0


async def record_book_read(
    db: AsyncSession,
    player_id: str,
    username: str,
    book_id: str,
    day: str | None = None,
) -> tuple[bool, int]:
    """Grant the read reward on the first read of a book per day.

    Returns:
        tuple: (awarded flag, XP granted by this call)
    """
    day = day or utc_today()

    inserted = await insert_if_absent(
        db,
        ReadLog,
        {"player_id": player_id, "book_id": book_id, "date": day},
        index_elements=("player_id", "book_id", "date"),
    )
    if not inserted:
        return False, 0

    reward = settings.read_xp_reward
    await _increment_xp(db, player_id, username, reward)
    await db.commit()

    logger.info(f"Player {player_id} earned {reward} XP for reading book {book_id}")
    return True, reward


async def set_playtime(db: AsyncSession, payload: PlaytimeUpdate) -> None:
    """Store the reported playtime, overwriting every field."""
    values = {
        "player_id": payload.player_id,
        "minutes": payload.minutes,
        "username": payload.username,
        "thumbnail": payload.thumbnail,
    }
    await upsert(
        db,
        PlaytimeEntry,
        values,
        index_elements=("player_id",),
        update={k: v for k, v in values.items() if k != "player_id"},
    )
    await db.commit()
