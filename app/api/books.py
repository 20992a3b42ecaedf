"""Books API routes."""
from fastapi import APIRouter, Query, Response, status

from app.config import settings
from app.core.deps import DbDep, ModeratorDep
from app.models.book import BookStatus
from app.schemas.book import (
    Book,
    BookActionResponse,
    BookList,
    BookPublish,
    BookSave,
    BookSaveResponse,
)
from app.services import publishing

router = APIRouter()


@router.get("", response_model=BookList)
async def list_books(
    db: DbDep,
    page: int = Query(1, ge=1),
    limit: int = Query(settings.default_page_size, ge=1, le=settings.max_page_size),
):
    """Get published books, newest first."""
    books, total = await publishing.list_published_books(db, page=page, limit=limit)
    return BookList(books=books, total=total, page=page, limit=limit)


@router.get("/drafts", response_model=list[Book])
async def list_drafts(db: DbDep, player_id: str = Query(..., alias="playerId", min_length=1)):
    """Get a player's drafts with content."""
    return await publishing.list_player_books(db, player_id, BookStatus.DRAFT)


@router.get("/published", response_model=list[Book])
async def list_published(db: DbDep, player_id: str = Query(..., alias="playerId", min_length=1)):
    """Get a player's published books with content."""
    return await publishing.list_player_books(db, player_id, BookStatus.PUBLISHED)


@router.get("/{book_id}", response_model=Book)
async def get_book(book_id: str, db: DbDep):
    """Get a book with its pages."""
    return await publishing.get_book_with_content(db, book_id)


@router.post("", response_model=BookSaveResponse, status_code=status.HTTP_201_CREATED)
async def save_book(
    payload: BookSave,
    db: DbDep,
    moderator: ModeratorDep,
    response: Response,
):
    """Create a draft, or replace an existing draft's content."""
    book, pages, created = await publishing.save_draft(db, payload, moderator)
    if not created:
        response.status_code = status.HTTP_200_OK

    return BookSaveResponse(
        message="Book saved!",
        book_id=book.book_id,
        book=publishing.serialize_book(book, pages),
    )


@router.post("/{book_id}/publish", response_model=BookActionResponse)
async def publish_book(book_id: str, payload: BookPublish, db: DbDep):
    """Publish one of the player's drafts."""
    book = await publishing.publish_book(db, book_id, payload)
    return BookActionResponse(message="Book published!", book=publishing.serialize_book(book))


@router.delete("/{book_id}", response_model=BookActionResponse)
async def delete_book(book_id: str, db: DbDep):
    """Delete a book and its pages."""
    book = await publishing.delete_book(db, book_id)
    return BookActionResponse(message="Book deleted", book=book)
