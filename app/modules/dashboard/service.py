"""
DashboardService - headline statistics computed from the owner's containers.
"""

from datetime import date
from typing import Iterable, Optional
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.utils import days_to_arrival, utcnow
from app.modules.containers.models import Container, ContainerStatus
from app.modules.containers.service import ContainerService
from .schemas import DashboardStatsResponse

# Window, in days, for a container to count as "arriving soon"
ARRIVING_WINDOW_DAYS = 7

MOVING_STATUSES = (ContainerStatus.departed, ContainerStatus.in_transit)


class DashboardService:

    @staticmethod
    def compute_stats(containers: Iterable[Container], today: date) -> DashboardStatsResponse:
        containers = list(containers)
        in_transit = arriving = delayed = 0

        for container in containers:
            if container.status in MOVING_STATUSES:
                in_transit += 1

            days = days_to_arrival(container.expected_arrival_date, today)
            if days is None:
                continue
            if 0 <= days <= ARRIVING_WINDOW_DAYS:
                arriving += 1
            if days < 0 and not container.actual_arrival_date:
                delayed += 1

        return DashboardStatsResponse(
            total=len(containers),
            in_transit=in_transit,
            arriving=arriving,
            delayed=delayed,
        )

    @staticmethod
    async def get_stats(
        db: AsyncSession, owner_id: str, today: Optional[date] = None
    ) -> DashboardStatsResponse:
        containers = await ContainerService.find_all(db, owner_id)
        return DashboardService.compute_stats(containers, today or utcnow().date())
