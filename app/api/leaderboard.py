"""Book leaderboard routes."""
from fastapi import APIRouter

from app.core.deps import DbDep, LeaderboardCacheDep
from app.schemas.leaderboard import BooksReadRow, BooksWrittenRow, PopularAuthorRow, ReviewerRow
from app.services import leaderboard

router = APIRouter()


@router.get("/most-books-read", response_model=list[BooksReadRow])
async def get_most_books_read(db: DbDep, cache: LeaderboardCacheDep):
    """Players who read the most distinct books."""
    return await cache.get_or_compute(leaderboard.MOST_BOOKS_READ, lambda: leaderboard.most_books_read(db))


@router.get("/top-reviewers", response_model=list[ReviewerRow])
async def get_top_reviewers(db: DbDep, cache: LeaderboardCacheDep):
    """Players with the most comments."""
    return await cache.get_or_compute(leaderboard.TOP_REVIEWERS, lambda: leaderboard.top_reviewers(db))


@router.get("/books-written", response_model=list[BooksWrittenRow])
async def get_books_written(db: DbDep, cache: LeaderboardCacheDep):
    """Players who wrote the most books."""
    return await cache.get_or_compute(leaderboard.BOOKS_WRITTEN, lambda: leaderboard.books_written(db))


@router.get("/most-popular-author", response_model=list[PopularAuthorRow])
async def get_most_popular_author(db: DbDep, cache: LeaderboardCacheDep):
    """Authors with the most upvotes on published books."""
    return await cache.get_or_compute(leaderboard.MOST_POPULAR_AUTHOR, lambda: leaderboard.most_popular_author(db))
