"""Book content page model."""
from sqlalchemy import ForeignKey, Integer, String, Text, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from app.database import Base


class BookPage(Base):
    """One page of a book, addressed by ``(book_id, page_number)``."""

    __tablename__ = "book_pages"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    book_id: Mapped[str] = mapped_column(
        String(64),
        ForeignKey("books.book_id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    page_number: Mapped[int] = mapped_column(Integer, nullable=False)
    text: Mapped[str] = mapped_column(Text, nullable=False)

    __table_args__ = (
        UniqueConstraint("book_id", "page_number", name="uq_book_page"),
    )

    def __repr__(self) -> str:
        return f"<BookPage {self.book_id}#{self.page_number}>"
