"""Comment schemas."""
from typing import Literal

from pydantic import Field

from app.schemas.book import Comment
from app.schemas.common import CamelModel


class CommentCreate(CamelModel):
    """Comment creation payload."""

    player_id: str = Field(..., min_length=1, max_length=64)
    username: str = Field(..., min_length=1, max_length=255)
    text: str = Field(..., min_length=1)


class CommentReaction(CamelModel):
    """Like/dislike toggle payload."""

    player_id: str = Field(..., min_length=1, max_length=64)
    reaction: Literal["like", "dislike"]


class CommentList(CamelModel):
    """Ranked comments."""

    success: bool = True
    comments: list[Comment]
