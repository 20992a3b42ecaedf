"""Book comment model."""
from datetime import datetime

from sqlalchemy import JSON, DateTime, ForeignKey, Integer, String, Text, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.database import Base, utcnow


class BookComment(Base):
    """A player's single comment on a book.

    ``likes`` and ``dislikes`` hold player ids; the author is always seeded
    into their own ``likes``.
    """

    __tablename__ = "book_comments"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    book_id: Mapped[str] = mapped_column(
        String(64),
        ForeignKey("books.book_id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    player_id: Mapped[str] = mapped_column(String(64), nullable=False, index=True)
    username: Mapped[str] = mapped_column(String(255), nullable=False)
    text: Mapped[str] = mapped_column(Text, nullable=False)
    likes: Mapped[list[str]] = mapped_column(JSON, default=list, nullable=False)
    dislikes: Mapped[list[str]] = mapped_column(JSON, default=list, nullable=False)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=utcnow, nullable=False)

    book = relationship("Book", back_populates="comments")

    __table_args__ = (
        UniqueConstraint("book_id", "player_id", name="uq_book_comment_player"),
    )

    def __repr__(self) -> str:
        return f"<BookComment {self.username}: {self.text[:30]}...>"
