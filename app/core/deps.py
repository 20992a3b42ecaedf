"""Dependency injection utilities."""
from typing import Annotated

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from app.config import settings
from app.database import get_db
from app.services.leaderboard_cache import LeaderboardCache
from app.services.moderation import ContentModerator


def get_moderator() -> ContentModerator:
    """Get the moderator built from the configured block-list."""
    return ContentModerator(settings.blocked_words)


def get_leaderboard_cache(request: Request) -> LeaderboardCache:
    """Get the application's leaderboard cache."""
    return request.app.state.leaderboard_cache


# Type aliases for dependency injection
DbDep = Annotated[AsyncSession, Depends(get_db)]
ModeratorDep = Annotated[ContentModerator, Depends(get_moderator)]
LeaderboardCacheDep = Annotated[LeaderboardCache, Depends(get_leaderboard_cache)]
