"""Database models."""
from app.models.activity_log import ReadLog, ViewLog
from app.models.book import Book, BookStatus
from app.models.book_page import BookPage
from app.models.book_vote import BookVote
from app.models.bookmark import Bookmark
from app.models.comment import BookComment
from app.models.player import PlaytimeEntry, XpEntry
from app.models.report import BookReport

__all__ = [
    "Book",
    "BookStatus",
    "BookPage",
    "BookVote",
    "BookComment",
    "BookReport",
    "ViewLog",
    "ReadLog",
    "XpEntry",
    "PlaytimeEntry",
    "Bookmark",
]
