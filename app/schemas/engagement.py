"""Vote, view, XP and playtime schemas."""
from pydantic import Field

from app.schemas.common import MAX_INTEGER, CamelModel


class VoteCreate(CamelModel):
    """Vote payload; only ``"up"`` votes exist."""

    player_id: str = Field(..., min_length=1, max_length=64)
    book_id: str = Field(..., min_length=1, max_length=64)
    vote_type: str = "up"


class VoteStatus(CamelModel):
    voted: bool


class VoteResult(CamelModel):
    success: bool = True
    upvotes: int


class ViewCreate(CamelModel):
    player_id: str = Field(..., min_length=1, max_length=64)
    book_id: str = Field(..., min_length=1, max_length=64)


class ViewResult(CamelModel):
    success: bool = True
    duplicate: bool
    views: int


class XpAward(CamelModel):
    """Direct XP grant; fractional amounts are floored."""

    player_id: str = Field(..., min_length=1, max_length=64)
    username: str = Field(..., min_length=1, max_length=255)
    amount: float = Field(..., ge=0, le=MAX_INTEGER, allow_inf_nan=False)


class XpResult(CamelModel):
    success: bool = True
    xp: int


class BookReadCreate(CamelModel):
    player_id: str = Field(..., min_length=1, max_length=64)
    username: str = Field(..., min_length=1, max_length=255)
    book_id: str = Field(..., min_length=1, max_length=64)


class BookReadResult(CamelModel):
    success: bool = True
    awarded: bool
    xp: int


class PlayerXp(CamelModel):
    player_id: str
    username: str | None = None
    xp: int = 0


class PlaytimeUpdate(CamelModel):
    player_id: str = Field(..., min_length=1, max_length=64)
    minutes: int = Field(..., ge=0, le=MAX_INTEGER)
    username: str | None = Field(None, max_length=255)
    thumbnail: str | None = Field(None, max_length=500)
