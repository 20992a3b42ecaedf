"""API routes."""
from fastapi import APIRouter

from app.api import (
    bookmarks,
    books,
    comments,
    leaderboard,
    playtime,
    reports,
    search,
    views,
    votes,
    xp,
)

api_router = APIRouter(prefix="/api")

# Books and their ledgers
api_router.include_router(books.router, prefix="/books", tags=["Books"])
api_router.include_router(comments.router, prefix="/books", tags=["Comments"])
api_router.include_router(reports.router, prefix="/books", tags=["Reports"])
api_router.include_router(search.router, prefix="/search", tags=["Search"])

# Engagement
api_router.include_router(votes.router, prefix="/votes", tags=["Votes"])
api_router.include_router(views.router, prefix="/views", tags=["Views"])
api_router.include_router(bookmarks.router, prefix="/bookmarks", tags=["Bookmarks"])

# Player progression
api_router.include_router(xp.router, prefix="/xp", tags=["XP"])
api_router.include_router(playtime.router, prefix="/playtime", tags=["Playtime"])
api_router.include_router(leaderboard.router, prefix="/leaderboard", tags=["Leaderboard"])
