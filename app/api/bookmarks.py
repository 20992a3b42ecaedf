"""Bookmark routes."""
from fastapi import APIRouter, Query

from app.core.deps import DbDep
from app.schemas.library import Bookmark, BookmarkLookup, BookmarkSave, BookmarkSaveResponse
from app.services import library

router = APIRouter()


@router.get("", response_model=BookmarkLookup)
async def get_bookmark(
    db: DbDep,
    player_id: str = Query(..., alias="playerId", min_length=1),
    book_id: str = Query(..., alias="bookId", min_length=1),
):
    """Get the player's bookmark in a book, if any."""
    bookmark = await library.get_bookmark(db, player_id, book_id)
    return BookmarkLookup(bookmark=Bookmark.model_validate(bookmark) if bookmark else None)


@router.post("", response_model=BookmarkSaveResponse)
async def save_bookmark(payload: BookmarkSave, db: DbDep):
    """Save the player's page in a book."""
    bookmark = await library.save_bookmark(db, payload)
    return BookmarkSaveResponse(bookmark=Bookmark.model_validate(bookmark))
