"""Book search routes."""
from fastapi import APIRouter, Query

from app.core.deps import DbDep
from app.schemas.book import Book
from app.services import publishing

router = APIRouter()


@router.get("", response_model=list[Book])
async def search_books(db: DbDep, q: str = Query("")):
    """Search published books by title or author."""
    return await publishing.search_books(db, q)
