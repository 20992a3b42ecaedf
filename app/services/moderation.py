"""Block-list content moderation."""
import logging
from typing import Iterable

from app.core.exceptions import BadRequestException

logger = logging.getLogger(__name__)


class ContentModerator:
    """Rejects text containing any blocked word (case-insensitive substring match)."""

    def __init__(self, blocked_words: Iterable[str]):
        self.blocked_words = [w.lower() for w in blocked_words if w]

    def find_violation(self, text: str) -> str | None:
        """Return the first blocked word found in ``text``, if any."""
        lowered = text.lower()
        for word in self.blocked_words:
            if word in lowered:
                return word
        return None

    def check(self, title: str, pages: Iterable[str]) -> None:
        """Raise BadRequestException when the title or any page is not allowed."""
        if self.find_violation(title):
            logger.warning("Rejected book title containing blocked content")
            raise BadRequestException("Title contains inappropriate content")

        for index, page in enumerate(pages, start=1):
            if self.find_violation(page):
                logger.warning(f"Rejected book page {index} containing blocked content")
                raise BadRequestException(f"Page {index} contains inappropriate content")
