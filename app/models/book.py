"""Book record model."""
import uuid
from datetime import datetime

from sqlalchemy import JSON, Boolean, DateTime, Index, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.database import Base, utcnow


class BookStatus:
    """Book lifecycle states."""
    DRAFT = "Draft"
    PUBLISHED = "Published"


def generate_book_id() -> str:
    """Random, globally unique book identifier."""
    return uuid.uuid4().hex


class Book(Base):
    """Book metadata, lifecycle state and engagement counters.

    Page text lives in ``book_pages``; ``page_count`` mirrors the number of
    rows stored there after every successful save.
    """

    __tablename__ = "books"

    book_id: Mapped[str] = mapped_column(
        String(64),
        primary_key=True,
        default=generate_book_id,
    )
    player_id: Mapped[str] = mapped_column(String(64), nullable=False, index=True)

    # Editable metadata
    title: Mapped[str] = mapped_column(String(100), nullable=False)
    author: Mapped[str] = mapped_column(String(255), default="Anonymous", nullable=False)
    cover_id: Mapped[str | None] = mapped_column(String(255), nullable=True)
    genres: Mapped[list[str]] = mapped_column(JSON, default=list, nullable=False)

    # Add-ons, only settable when publishing
    glowing_book: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    custom_cover: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)

    # Lifecycle
    status: Mapped[str] = mapped_column(
        String(20),
        default=BookStatus.DRAFT,
        nullable=False,
        index=True,
    )
    published: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=utcnow, nullable=False, index=True)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=utcnow,
        onupdate=utcnow,
        nullable=False,
    )

    # Aggregates
    page_count: Mapped[int] = mapped_column(Integer, default=0, nullable=False)
    views: Mapped[int] = mapped_column(Integer, default=0, nullable=False)
    upvotes: Mapped[int] = mapped_column(Integer, default=0, nullable=False)

    # Relationships
    votes = relationship(
        "BookVote",
        back_populates="book",
        cascade="all, delete-orphan",
        lazy="selectin",
        order_by="BookVote.id",
    )
    comments = relationship(
        "BookComment",
        back_populates="book",
        cascade="all, delete-orphan",
        lazy="selectin",
        order_by="BookComment.id",
    )
    reports = relationship(
        "BookReport",
        back_populates="book",
        cascade="all, delete-orphan",
        lazy="selectin",
        order_by="BookReport.id",
    )

    __table_args__ = (
        Index("ix_book_player_status", "player_id", "status"),
    )

    @property
    def voters(self) -> list[str]:
        return [vote.player_id for vote in self.votes]

    def __repr__(self) -> str:
        return f"<Book {self.book_id} {self.status}: {self.title}>"
