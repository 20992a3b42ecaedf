"""Book abuse report routes."""
from fastapi import APIRouter, status

from app.core.deps import DbDep
from app.schemas.library import ReportCreate, ReportResult
from app.services import library

router = APIRouter()


@router.post("/{book_id}/reports", response_model=ReportResult, status_code=status.HTTP_201_CREATED)
async def report_book(book_id: str, payload: ReportCreate, db: DbDep):
    """File an abuse report against a book."""
    report = await library.file_report(db, book_id, payload)
    return ReportResult(report_id=report.id)
