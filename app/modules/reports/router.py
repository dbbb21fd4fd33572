"""
Reports Router - the container status report, as JSON or printable PDF.
"""

from fastapi import APIRouter, Depends, Response
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.db.engine import get_db_util
from app.core.utils import utcnow
from app.modules.users.auth import get_current_user
from app.modules.users.identity import IdentityUser
from .service import ReportService
from .schemas import StatusReportResponse

router = APIRouter(prefix="/reports", tags=["reports"])


@router.get("/status", response_model=StatusReportResponse)
async def get_status_report(
    current_user: IdentityUser = Depends(get_current_user),
    db: AsyncSession = Depends(get_db_util),
):
    """
    Status report for the current user.

    Returns:
        - summary: shipped / in production / total counts
        - shipped: departed and in-transit containers with transit progress
        - production: pending containers
    """
    return await ReportService.get_status_report(db, current_user.id)


@router.get("/status.pdf")
async def download_status_report(
    current_user: IdentityUser = Depends(get_current_user),
    db: AsyncSession = Depends(get_db_util),
):
    """Status report rendered as a PDF, ready to print"""
    pdf_bytes = await ReportService.get_status_report_pdf(db, current_user.id)
    filename = f"container-status-{utcnow().date().isoformat()}.pdf"
    return Response(
        content=pdf_bytes,
        media_type="application/pdf",
        headers={"Content-Disposition": f'inline; filename="{filename}"'},
    )
