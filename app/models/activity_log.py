"""Daily view/read dedup logs."""
from sqlalchemy import Integer, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from app.database import Base


class ViewLog(Base):
    """One row per (player, book, UTC day) that counted as a view."""

    __tablename__ = "view_logs"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    player_id: Mapped[str] = mapped_column(String(64), nullable=False)
    book_id: Mapped[str] = mapped_column(String(64), nullable=False, index=True)
    date: Mapped[str] = mapped_column(String(10), nullable=False)  # YYYY-MM-DD

    __table_args__ = (
        UniqueConstraint("player_id", "book_id", "date", name="uq_view_log_day"),
    )


class ReadLog(Base):
    """One row per (player, book, UTC day) that earned read XP."""

    __tablename__ = "read_logs"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    player_id: Mapped[str] = mapped_column(String(64), nullable=False, index=True)
    book_id: Mapped[str] = mapped_column(String(64), nullable=False)
    date: Mapped[str] = mapped_column(String(10), nullable=False)  # YYYY-MM-DD

    __table_args__ = (
        UniqueConstraint("player_id", "book_id", "date", name="uq_read_log_day"),
    )
