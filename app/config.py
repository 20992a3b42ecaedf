"""Application configuration."""
from typing import List

from pydantic import field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from sqlalchemy.engine import make_url

# Backends with INSERT ... ON CONFLICT support
SUPPORTED_DATABASE_BACKENDS = ("sqlite", "postgresql")


class Settings(BaseSettings):
    """Application settings."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Application
    app_name: str = "Bookwright"
    app_version: str = "0.1.0"
    debug: bool = False

    # Server
    host: str = "0.0.0.0"
    port: int = 8000

    # Database
    database_url: str = "sqlite+aiosqlite:///./data/bookwright.db"

    # CORS
    cors_origins: List[str] = [
        "http://localhost:5173",
        "http://localhost:8080",
        "http://localhost:3000",
        "http://127.0.0.1:5173",
        "http://127.0.0.1:8080",
        "http://127.0.0.1:3000",
    ]

    # Moderation (JSON list when set from the environment)
    blocked_words: List[str] = ["inappropriate", "offensive", "slur"]

    # Book limits
    max_title_length: int = 100
    max_page_length: int = 1000
    max_genres: int = 3
    max_comment_length: int = 500
    blank_page_text: str = "(blank page)"
    missing_content_text: str = "(no content)"

    # Engagement
    read_xp_reward: int = 5
    leaderboard_size: int = 10
    leaderboard_ttl_seconds: float = 30.0

    # Listing
    default_page_size: int = 20
    max_page_size: int = 100

    @field_validator("database_url")
    @classmethod
    def check_database_backend(cls, value: str) -> str:
        backend = make_url(value).get_backend_name()
        if backend not in SUPPORTED_DATABASE_BACKENDS:
            raise ValueError(
                f"Unsupported database backend '{backend}'; use one of {', '.join(SUPPORTED_DATABASE_BACKENDS)}"
            )
        return value

    @model_validator(mode="after")
    def normalize_blocked_words(self):
        """Lowercase the block-list and drop empty entries."""
        self.blocked_words = [w.strip().lower() for w in self.blocked_words if w and w.strip()]
        return self


settings = Settings()
