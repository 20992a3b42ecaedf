"""Playtime routes."""
from fastapi import APIRouter

from app.core.deps import DbDep
from app.schemas.common import SuccessResponse
from app.schemas.engagement import PlaytimeUpdate
from app.schemas.leaderboard import PlaytimeRow
from app.services import engagement, leaderboard

router = APIRouter()


@router.post("", response_model=SuccessResponse)
async def set_playtime(payload: PlaytimeUpdate, db: DbDep):
    """Record a player's total playtime."""
    await engagement.set_playtime(db, payload)
    return SuccessResponse()


@router.get("/leaderboard", response_model=list[PlaytimeRow])
async def get_playtime_leaderboard(db: DbDep):
    """Top players by playtime."""
    return await leaderboard.playtime_leaderboard(db)
