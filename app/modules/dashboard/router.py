"""
Dashboard Router - aggregated counts for the dashboard header.
"""

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.db.engine import get_db_util
from app.modules.users.auth import get_current_user
from app.modules.users.identity import IdentityUser
from .service import DashboardService
from .schemas import DashboardStatsResponse

router = APIRouter(prefix="/dashboard", tags=["dashboard"])


@router.get("", response_model=DashboardStatsResponse)
async def get_dashboard(
    current_user: IdentityUser = Depends(get_current_user),
    db: AsyncSession = Depends(get_db_util),
):
    """
    Get dashboard counts in a single API call.

    Returns:
        - total: all containers
        - in_transit: departed or in transit
        - arriving: expected within 7 days
        - delayed: expected arrival passed, not yet arrived
    """
    return await DashboardService.get_stats(db, current_user.id)
