"""Per-player progression ledgers."""
from datetime import datetime

from sqlalchemy import DateTime, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from app.database import Base, utcnow


class XpEntry(Base):
    """Monotonic XP counter for a player."""

    __tablename__ = "xp_ledger"

    player_id: Mapped[str] = mapped_column(String(64), primary_key=True)
    username: Mapped[str | None] = mapped_column(String(255), nullable=True)
    xp: Mapped[int] = mapped_column(Integer, default=0, nullable=False, index=True)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=utcnow, nullable=False)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=utcnow,
        onupdate=utcnow,
        nullable=False,
    )

    def __repr__(self) -> str:
        return f"<XpEntry {self.player_id}: {self.xp}>"


class PlaytimeEntry(Base):
    """Last reported playtime for a player."""

    __tablename__ = "playtime"

    player_id: Mapped[str] = mapped_column(String(64), primary_key=True)
    username: Mapped[str | None] = mapped_column(String(255), nullable=True)
    thumbnail: Mapped[str | None] = mapped_column(String(500), nullable=True)
    minutes: Mapped[int] = mapped_column(Integer, default=0, nullable=False, index=True)
