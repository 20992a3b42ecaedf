"""View counting routes."""
from fastapi import APIRouter

from app.core.deps import DbDep
from app.schemas.engagement import ViewCreate, ViewResult
from app.services import engagement

router = APIRouter()


@router.post("", response_model=ViewResult)
async def record_view(payload: ViewCreate, db: DbDep):
    """Count a view, at most once per player, book and day."""
    duplicate, views = await engagement.record_view(db, payload.player_id, payload.book_id)
    return ViewResult(duplicate=duplicate, views=views)
