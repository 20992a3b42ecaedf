"""Upvote API routes."""
from fastapi import APIRouter, Query

from app.core.deps import DbDep
from app.schemas.engagement import VoteCreate, VoteResult, VoteStatus
from app.services import voting

router = APIRouter()


@router.get("", response_model=VoteStatus)
async def check_vote(
    db: DbDep,
    player_id: str = Query(..., alias="playerId", min_length=1),
    book_id: str = Query(..., alias="bookId", min_length=1),
):
    """Has the player upvoted the book?"""
    return VoteStatus(voted=await voting.has_voted(db, player_id, book_id))


@router.post("", response_model=VoteResult)
async def cast_vote(payload: VoteCreate, db: DbDep):
    """Upvote a book; repeat votes are ignored."""
    upvotes = await voting.cast_vote(db, payload.player_id, payload.book_id, payload.vote_type)
    return VoteResult(upvotes=upvotes)
