"""
Dashboard DTOs (Data Transfer Objects)
"""

from pydantic import BaseModel, Field


class DashboardStatsResponse(BaseModel):
    """Headline counts for the signed-in user's containers"""

    total: int = Field(..., description="Total number of containers")
    in_transit: int = Field(..., description="Containers departed or in transit")
    arriving: int = Field(..., description="Containers expected within the next 7 days")
    delayed: int = Field(
        ..., description="Containers past their expected arrival with no actual arrival"
    )

    class Config:
        from_attributes = True
