"""Book vote model."""
from datetime import datetime

from sqlalchemy import DateTime, ForeignKey, Integer, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.database import Base, utcnow


class BookVote(Base):
    """Membership of a player in a book's voter set."""

    __tablename__ = "book_votes"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    book_id: Mapped[str] = mapped_column(
        String(64),
        ForeignKey("books.book_id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    player_id: Mapped[str] = mapped_column(String(64), nullable=False)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=utcnow, nullable=False)

    book = relationship("Book", back_populates="votes")

    __table_args__ = (
        UniqueConstraint("book_id", "player_id", name="uq_book_vote_player"),
    )
