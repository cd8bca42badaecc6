"""
Dashboard DTOs for the application layer.
"""

from pydantic import Field

from .base_dto import RequestDTO


class DashboardRequestDTO(RequestDTO):
    """DTO for requesting the dashboard overview."""

    recent_activities_limit: int = Field(default=10, ge=1, le=100, description="Number of recent activities")
