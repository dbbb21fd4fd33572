"""
Report DTOs (Data Transfer Objects)
"""

from pydantic import BaseModel
from typing import List, Optional
from datetime import date

from app.modules.containers.models import ContainerStatus


class ReportItemResponse(BaseModel):
    """One container line in the status report"""

    id: int
    container_number: str
    cargo_description: Optional[str] = None
    expected_arrival_date: Optional[str] = None
    status: ContainerStatus
    days_to_arrival: Optional[int] = None
    progress_percent: float
    urgency: str
    container_count: int

    class Config:
        from_attributes = True


class ReportSummaryResponse(BaseModel):
    shipped: int
    production: int
    total: int


class StatusReportResponse(BaseModel):
    """Status report: shipped containers and containers still in production"""

    report_date: date
    summary: ReportSummaryResponse
    shipped: List[ReportItemResponse]
    production: List[ReportItemResponse]
