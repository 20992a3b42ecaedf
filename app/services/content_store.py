"""Paginated book content storage.

Pages are replaced wholesale on every save: all rows for the book are
deleted and the new pages inserted. A reader running between the two
statements in another transaction may see zero or partial pages, and a
failed insert leaves the book without pages until the next save.
"""
from collections import defaultdict
from typing import Iterable

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.config import settings
from app.models.book_page import BookPage


def normalize_pages(pages: Iterable[str]) -> list[str]:
    """Replace whitespace-only pages with the blank page marker."""
    return [page if page.strip() else settings.blank_page_text for page in pages]


async def replace_pages(db: AsyncSession, book_id: str, pages: list[str]) -> int:
    """Swap the stored pages of a book for ``pages``.

    Returns:
        int: Number of pages now stored
    """
    await db.execute(delete(BookPage).where(BookPage.book_id == book_id))
    db.add_all(
        BookPage(book_id=book_id, page_number=number, text=text)
        for number, text in enumerate(pages, start=1)
    )
    await db.flush()
    return len(pages)


async def delete_pages(db: AsyncSession, book_id: str) -> None:
    await db.execute(delete(BookPage).where(BookPage.book_id == book_id))


async def load_pages(db: AsyncSession, book_id: str) -> list[str]:
    """Get a book's page texts in page order (placeholder page if none)."""
    result = await db.execute(
        select(BookPage.text)
        .where(BookPage.book_id == book_id)
        .order_by(BookPage.page_number)
    )
    pages = list(result.scalars().all())
    return pages or [settings.missing_content_text]


async def load_pages_for(db: AsyncSession, book_ids: list[str]) -> dict[str, list[str]]:
    """Batch variant of :func:`load_pages` keyed by book id."""
    if not book_ids:
        return {}

    result = await db.execute(
        select(BookPage.book_id, BookPage.text)
        .where(BookPage.book_id.in_(book_ids))
        .order_by(BookPage.book_id, BookPage.page_number)
    )
    grouped: dict[str, list[str]] = defaultdict(list)
    for book_id, text in result.all():
        grouped[book_id].append(text)

    return {book_id: grouped.get(book_id) or [settings.missing_content_text] for book_id in book_ids}
