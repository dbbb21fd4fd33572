"""
ReportService - builds the container status report.

Containers are split into "shipped" (departed or in transit) and
"production" (pending). Arrived and delayed containers appear only in the
total. Each line carries the transit figures the printed report shows.
"""

import asyncio
from concurrent.futures import ThreadPoolExecutor
from datetime import date
from typing import Iterable, Optional
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.utils import (
    arrival_urgency,
    container_count,
    days_to_arrival,
    transit_progress,
    utcnow,
)
from app.modules.containers.models import Container, ContainerStatus
from app.modules.containers.service import ContainerService
from .report_generator import StatusReportPDF
from .schemas import ReportItemResponse, ReportSummaryResponse, StatusReportResponse

SHIPPED_STATUSES = (ContainerStatus.departed, ContainerStatus.in_transit)
PRODUCTION_STATUSES = (ContainerStatus.pending,)

# Thread pool for CPU-bound PDF generation (non-blocking)
_executor = ThreadPoolExecutor(max_workers=2)


def build_report_item(container: Container, today: date) -> ReportItemResponse:
    days = days_to_arrival(container.expected_arrival_date, today)
    return ReportItemResponse(
        id=container.id,
        container_number=container.container_number,
        cargo_description=container.cargo_description,
        expected_arrival_date=container.expected_arrival_date,
        status=container.status,
        days_to_arrival=days,
        progress_percent=round(transit_progress(days), 2),
        urgency=arrival_urgency(days),
        container_count=container_count(container.container_number),
    )


class ReportService:

    @staticmethod
    def build_status_report(
        containers: Iterable[Container], today: date
    ) -> StatusReportResponse:
        containers = list(containers)
        shipped = [
            build_report_item(c, today) for c in containers if c.status in SHIPPED_STATUSES
        ]
        production = [
            build_report_item(c, today)
            for c in containers
            if c.status in PRODUCTION_STATUSES
        ]
        return StatusReportResponse(
            report_date=today,
            summary=ReportSummaryResponse(
                shipped=len(shipped),
                production=len(production),
                total=len(containers),
            ),
            shipped=shipped,
            production=production,
        )

    @staticmethod
    async def get_status_report(
        db: AsyncSession, owner_id: str, today: Optional[date] = None
    ) -> StatusReportResponse:
        containers = await ContainerService.find_all(db, owner_id)
        return ReportService.build_status_report(containers, today or utcnow().date())

    @staticmethod
    async def get_status_report_pdf(
        db: AsyncSession, owner_id: str, today: Optional[date] = None
    ) -> bytes:
        report = await ReportService.get_status_report(db, owner_id, today)
        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(
            _executor, StatusReportPDF.generate_status_report_pdf, report
        )
