"""Bookmark and report schemas."""
from datetime import datetime

from pydantic import Field

from app.schemas.common import MAX_INTEGER, CamelModel


class BookmarkSave(CamelModel):
    player_id: str = Field(..., min_length=1, max_length=64)
    book_id: str = Field(..., min_length=1, max_length=64)
    page: int = Field(..., ge=1, le=MAX_INTEGER)


class Bookmark(CamelModel):
    player_id: str
    book_id: str
    page: int
    updated_at: datetime


class BookmarkSaveResponse(CamelModel):
    success: bool = True
    bookmark: Bookmark


class BookmarkLookup(CamelModel):
    bookmark: Bookmark | None


class ReportCreate(CamelModel):
    player_id: str = Field(..., min_length=1, max_length=64)
    player_name: str | None = Field(None, max_length=255)
    reason: str = Field(..., min_length=1, max_length=1000)


class ReportResult(CamelModel):
    success: bool = True
    report_id: int
