"""Pydantic schemas."""
from app.schemas.book import (
    Book,
    BookActionResponse,
    BookList,
    BookPublish,
    BookSave,
    BookSaveResponse,
    Comment,
    Report,
)
from app.schemas.comment import CommentCreate, CommentList, CommentReaction
from app.schemas.common import ErrorDetail, ErrorResponse, SuccessResponse

__all__ = [
    "Book",
    "BookActionResponse",
    "BookList",
    "BookPublish",
    "BookSave",
    "BookSaveResponse",
    "Comment",
    "Report",
    "CommentCreate",
    "CommentList",
    "CommentReaction",
    "ErrorDetail",
    "ErrorResponse",
    "SuccessResponse",
]
