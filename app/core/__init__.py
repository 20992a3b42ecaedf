"""Core module."""
from app.core.deps import DbDep, LeaderboardCacheDep, ModeratorDep
from app.core.exceptions import (
    AppException,
    BadRequestException,
    ConflictException,
    ForbiddenException,
    InternalServerException,
    NotFoundException,
)

__all__ = [
    "DbDep",
    "LeaderboardCacheDep",
    "ModeratorDep",
    "AppException",
    "NotFoundException",
    "BadRequestException",
    "ForbiddenException",
    "ConflictException",
    "InternalServerException",
]
