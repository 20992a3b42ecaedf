"""XP ledger routes."""
from fastapi import APIRouter, Query

from app.core.deps import DbDep
from app.schemas.engagement import BookReadCreate, BookReadResult, PlayerXp, XpAward, XpResult
from app.schemas.leaderboard import XpRow
from app.services import engagement, leaderboard

router = APIRouter()


@router.get("", response_model=PlayerXp)
async def get_player_xp(db: DbDep, player_id: str = Query(..., alias="playerId", min_length=1)):
    """Get a player's XP total."""
    entry = await engagement.get_xp(db, player_id)
    if not entry:
        return PlayerXp(player_id=player_id)
    return PlayerXp.model_validate(entry)


@router.post("", response_model=XpResult)
async def award_xp(payload: XpAward, db: DbDep):
    """Grant XP to a player."""
    xp = await engagement.award_xp(db, payload.player_id, payload.username, payload.amount)
    return XpResult(xp=xp)


@router.post("/bookread", response_model=BookReadResult)
async def book_read(payload: BookReadCreate, db: DbDep):
    """Grant the daily read reward for a book."""
    awarded, xp = await engagement.record_book_read(db, payload.player_id, payload.username, payload.book_id)
    return BookReadResult(awarded=awarded, xp=xp)


@router.get("/leaderboard", response_model=list[XpRow])
async def get_xp_leaderboard(db: DbDep):
    """Top players by XP."""
    return await leaderboard.xp_leaderboard(db)
