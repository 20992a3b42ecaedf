"""Leaderboard row schemas."""
from app.schemas.common import CamelModel


class BooksReadRow(CamelModel):
    player_id: str
    username: str
    books_read: int


class ReviewerRow(CamelModel):
    player_id: str
    username: str
    review_count: int


class BooksWrittenRow(CamelModel):
    player_id: str
    username: str
    books_written: int


class PopularAuthorRow(CamelModel):
    player_id: str
    username: str
    total_upvotes: int


class XpRow(CamelModel):
    player_id: str
    username: str | None
    xp: int


class PlaytimeRow(CamelModel):
    player_id: str
    username: str | None
    thumbnail: str | None
    minutes: int
