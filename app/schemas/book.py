"""Book schemas."""
from datetime import datetime

from pydantic import Field

from app.schemas.common import CamelModel


class BookSave(CamelModel):
    """Draft creation/update payload.

    Length limits are checked by the publishing service against settings,
    so only structural rules live here.
    """

    book_id: str | None = Field(None, min_length=1, max_length=64)
    title: str = Field(..., min_length=1)
    content: list[str] = Field(..., min_length=1)
    player_id: str = Field(..., min_length=1, max_length=64)
    author: str | None = Field(None, max_length=255)
    cover_id: str | None = Field(None, max_length=255)
    genres: list[str] | None = None


class BookPublish(CamelModel):
    """Publish payload."""

    player_id: str = Field(..., min_length=1, max_length=64)
    glowing_book: bool = False
    custom_cover: bool = False


class Comment(CamelModel):
    """Comment response schema."""

    id: int
    player_id: str
    username: str
    text: str
    likes: list[str]
    dislikes: list[str]
    created_at: datetime


class Report(CamelModel):
    """Report response schema."""

    id: int
    player_id: str
    player_name: str | None
    reason: str
    created_at: datetime


class Book(CamelModel):
    """Book record response schema."""

    book_id: str
    player_id: str
    title: str
    author: str
    cover_id: str | None
    genres: list[str]
    glowing_book: bool
    custom_cover: bool
    status: str
    published: bool
    page_count: int
    views: int
    upvotes: int
    voters: list[str]
    comments: list[Comment]
    reports: list[Report]
    created_at: datetime
    updated_at: datetime
    content: list[str] | None = None


class BookList(CamelModel):
    """Paginated book listing."""

    books: list[Book]
    total: int
    page: int
    limit: int


class BookSaveResponse(CamelModel):
    """Draft save response."""

    message: str
    book_id: str
    book: Book


class BookActionResponse(CamelModel):
    """Publish/delete response."""

    success: bool = True
    message: str
    book: Book
