"""
Dashboard use cases.
"""

from dataclasses import dataclass, field
from typing import List

from marketplace.application.dto.dashboard_dto import DashboardRequestDTO
from marketplace.domain.models.activity import Activity
from marketplace.infrastructure.db.facade import DocumentFacade, Statistics
from marketplace.infrastructure.mappers.activity_mapper import ActivityMapper
from .base_use_case import QueryUseCase


@dataclass
class DashboardOverview:
    """Counters and latest activity shown on the dashboard."""

    statistics: Statistics
    recent_activities: List[Activity] = field(default_factory=list)


class GetDashboardOverviewUseCase(QueryUseCase[DashboardRequestDTO, DashboardOverview]):
    """Use case for loading the dashboard overview."""

    def __init__(self, facade: DocumentFacade):
        super().__init__()
        self.facade = facade
        self.mapper = ActivityMapper()

    async def _execute_business_logic(self, request: DashboardRequestDTO) -> DashboardOverview:
        statistics = await self.facade.get_statistics()
        documents = await self.facade.get_recent_activities(request.recent_activities_limit)
        return DashboardOverview(
            statistics=statistics,
            recent_activities=[self.mapper.to_entity(document) for document in documents]
        )
