"""Book comments API routes."""
from fastapi import APIRouter

from app.core.deps import DbDep
from app.schemas.book import Comment
from app.schemas.comment import CommentCreate, CommentList, CommentReaction
from app.services import comments as comment_service

router = APIRouter()


def _comment_list(comments) -> CommentList:
    return CommentList(comments=[Comment.model_validate(c) for c in comments])


@router.get("/{book_id}/comments", response_model=CommentList)
async def list_comments(book_id: str, db: DbDep):
    """Get a book's comments, most liked first."""
    return _comment_list(await comment_service.list_comments(db, book_id))


@router.post("/{book_id}/comments", response_model=CommentList)
async def add_comment(book_id: str, payload: CommentCreate, db: DbDep):
    """Add the player's one comment on a book."""
    return _comment_list(await comment_service.add_comment(db, book_id, payload))


@router.post("/{book_id}/comments/{comment_id}/reactions", response_model=CommentList)
async def react_to_comment(book_id: str, comment_id: int, payload: CommentReaction, db: DbDep):
    """Toggle a like or dislike on a comment."""
    return _comment_list(await comment_service.react_to_comment(db, book_id, comment_id, payload))
