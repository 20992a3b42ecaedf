"""Book publishing workflow: drafts, publishing, deletion and reads."""
import logging

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.config import settings
from app.core.exceptions import BadRequestException, ConflictException, NotFoundException
from app.database import utcnow
from app.models.book import Book, BookStatus, generate_book_id
from app.schemas.book import Book as BookSchema
from app.schemas.book import BookPublish, BookSave
from app.services.content_store import (
    delete_pages,
    load_pages,
    load_pages_for,
    normalize_pages,
    replace_pages,
)
from app.services.moderation import ContentModerator

logger = logging.getLogger(__name__)

# Path segments claimed by the player listing routes under /api/books
RESERVED_BOOK_IDS = frozenset({"drafts", "published"})


def validate_book_payload(payload: BookSave) -> None:
    """Enforce the configured title, page and genre limits."""
    if payload.book_id in RESERVED_BOOK_IDS:
        raise BadRequestException(f"'{payload.book_id}' is a reserved book ID")
    if not payload.title.strip():
        raise BadRequestException("Title is required")
    if len(payload.title) > settings.max_title_length:
        raise BadRequestException(f"Title must be at most {settings.max_title_length} characters")

    for index, page in enumerate(payload.content, start=1):
        if len(page) > settings.max_page_length:
            raise BadRequestException(
                f"Page {index} exceeds {settings.max_page_length} characters"
            )

    if payload.genres is not None:
        if len(payload.genres) > settings.max_genres:
            raise BadRequestException(f"At most {settings.max_genres} genres are allowed")
        if any(not genre.strip() for genre in payload.genres):
            raise BadRequestException("Genres must be non-empty strings")


def serialize_book(book: Book, content: list[str] | None = None) -> BookSchema:
    data = BookSchema.model_validate(book)
    if content is not None:
        data = data.model_copy(update={"content": content})
    return data


async def find_book(db: AsyncSession, book_id: str) -> Book | None:
    """Load a book record fresh from the database, with its ledgers."""
    result = await db.execute(
        select(Book)
        .where(Book.book_id == book_id)
        .execution_options(populate_existing=True)
    )
    return result.scalar_one_or_none()


async def get_book_or_404(db: AsyncSession, book_id: str) -> Book:
    book = await find_book(db, book_id)
    if not book:
        raise NotFoundException("Book not found")
    return book


async def save_draft(
    db: AsyncSession,
    payload: BookSave,
    moderator: ContentModerator,
) -> tuple[Book, list[str], bool]:
    """Create or replace a draft.

    Engagement (views, upvotes, voters, comments, reports) of an existing
    book is left untouched; the book returns to Draft state.

    Returns:
        tuple: (book, stored pages, created flag)
    """
    validate_book_payload(payload)
    moderator.check(payload.title, payload.content)

    book_id = payload.book_id or generate_book_id()
    book = await find_book(db, book_id)
    if book and book.player_id != payload.player_id:
        raise ConflictException("A book with this ID belongs to another player")

    pages = normalize_pages(payload.content)
    created = book is None

    if created:
        book = Book(
            book_id=book_id,
            player_id=payload.player_id,
            title=payload.title,
            author=payload.author or "Anonymous",
            cover_id=payload.cover_id,
            genres=list(payload.genres or []),
        )
        db.add(book)
    else:
        book.title = payload.title
        if payload.author:
            book.author = payload.author
        if payload.cover_id is not None:
            book.cover_id = payload.cover_id
        if payload.genres is not None:
            book.genres = list(payload.genres)

    book.status = BookStatus.DRAFT
    book.published = False
    book.page_count = len(pages)
    book.updated_at = utcnow()
    await db.flush()

    await replace_pages(db, book_id, pages)
    await db.commit()

    logger.info(f"Saved draft {book_id} ({len(pages)} pages) for player {payload.player_id}")
    return await get_book_or_404(db, book_id), pages, created


async def publish_book(db: AsyncSession, book_id: str, payload: BookPublish) -> Book:
    """Move the player's draft to Published.

    Missing books, books owned by another player and already published books
    all surface as the same NotFoundException.
    """
    result = await db.execute(
        select(Book).where(
            Book.book_id == book_id,
            Book.player_id == payload.player_id,
            Book.status == BookStatus.DRAFT,
            Book.published.is_(False),
        )
    )
    book = result.scalar_one_or_none()
    if not book:
        raise NotFoundException("Draft not found or already published")

    book.status = BookStatus.PUBLISHED
    book.published = True
    book.glowing_book = payload.glowing_book
    book.custom_cover = payload.custom_cover
    book.updated_at = utcnow()
    await db.commit()

    logger.info(f"Published book {book_id} for player {payload.player_id}")
    return await get_book_or_404(db, book_id)


async def delete_book(db: AsyncSession, book_id: str) -> BookSchema:
    """Delete a book's pages and record; returns the record as it was."""
    book = await get_book_or_404(db, book_id)
    snapshot = serialize_book(book)

    await delete_pages(db, book_id)
    await db.delete(book)
    await db.commit()

    logger.info(f"Deleted book {book_id}")
    return snapshot


async def get_book_with_content(db: AsyncSession, book_id: str) -> BookSchema:
    book = await get_book_or_404(db, book_id)
    return serialize_book(book, await load_pages(db, book_id))


async def list_published_books(
    db: AsyncSession,
    page: int = 1,
    limit: int = 20,
) -> tuple[list[BookSchema], int]:
    """Get published books, newest first, with the total count."""
    query = select(Book).where(Book.published.is_(True))

    count_result = await db.execute(select(func.count()).select_from(query.subquery()))
    total = count_result.scalar() or 0

    query = (
        query.order_by(Book.created_at.desc(), Book.book_id)
        .offset((page - 1) * limit)
        .limit(limit)
    )
    result = await db.execute(query.execution_options(populate_existing=True))
    books = result.scalars().all()

    return [serialize_book(book) for book in books], total


async def list_player_books(db: AsyncSession, player_id: str, status: str) -> list[BookSchema]:
    """Get one player's books in ``status``, each with its content."""
    result = await db.execute(
        select(Book)
        .where(Book.player_id == player_id, Book.status == status)
        .order_by(Book.updated_at.desc())
        .execution_options(populate_existing=True)
    )
    books = result.scalars().all()
    contents = await load_pages_for(db, [book.book_id for book in books])
    return [serialize_book(book, contents[book.book_id]) for book in books]


async def search_books(db: AsyncSession, term: str, limit: int = 50) -> list[BookSchema]:
    """Published books whose title or author contains ``term`` (case-insensitive)."""
    term = term.strip()
    if len(term) < 2:
        raise BadRequestException("Query too short")

    result = await db.execute(
        select(Book)
        .where(
            Book.published.is_(True),
            Book.title.icontains(term, autoescape=True) | Book.author.icontains(term, autoescape=True),
        )
        .order_by(Book.created_at.desc())
        .limit(limit)
        .execution_options(populate_existing=True)
    )
    return [serialize_book(book) for book in result.scalars().all()]
