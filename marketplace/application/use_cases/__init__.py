"""
Application use cases.
"""

from .base_use_case import UseCaseResult, BaseUseCase, QueryUseCase, AuthenticatedUseCase
from .dashboard_use_cases import DashboardOverview, GetDashboardOverviewUseCase
from .project_use_cases import (
    ListProjectsPageUseCase,
    SearchProjectsUseCase,
    CreateProjectUseCase,
    ApplyToProjectUseCase,
)

__all__ = [
    "UseCaseResult",
    "BaseUseCase",
    "QueryUseCase",
    "AuthenticatedUseCase",
    "DashboardOverview",
    "GetDashboardOverviewUseCase",
    "ListProjectsPageUseCase",
    "SearchProjectsUseCase",
    "CreateProjectUseCase",
    "ApplyToProjectUseCase",
]
