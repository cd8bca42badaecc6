"""
Application composition root.
Wires configuration, the document facade, typed repositories, storage,
the session context and the use cases into one container.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from marketplace.config import Settings, get_settings
from marketplace.application.session_context import SessionContext
from marketplace.application.use_cases import (
    ApplyToProjectUseCase,
    CreateProjectUseCase,
    GetDashboardOverviewUseCase,
    ListProjectsPageUseCase,
    SearchProjectsUseCase,
)
from marketplace.domain.repositories.document_store import DocumentStore
from marketplace.domain.services.identity_provider import IdentityProvider
from marketplace.domain.services.object_storage import ObjectStorage
from marketplace.infrastructure.auth.supabase_auth import Authorizer
from marketplace.infrastructure.db import DocumentFacade, get_document_store
from marketplace.infrastructure.repositories import (
    ActivityRepository,
    ApplicationRepository,
    CommentRepository,
    MessageRepository,
    NotificationRepository,
    ProjectRepository,
    UserProfileRepository,
)
from marketplace.infrastructure.storage import StorageService, get_object_storage


logger = logging.getLogger(__name__)


@dataclass
class Repositories:
    users: UserProfileRepository
    projects: ProjectRepository
    applications: ApplicationRepository
    messages: MessageRepository
    comments: CommentRepository
    activities: ActivityRepository
    notifications: NotificationRepository


@dataclass
class UseCases:
    dashboard_overview: GetDashboardOverviewUseCase
    list_projects_page: ListProjectsPageUseCase
    search_projects: SearchProjectsUseCase
    create_project: CreateProjectUseCase
    apply_to_project: ApplyToProjectUseCase


@dataclass
class Marketplace:
    """Everything the presentation layer needs, built once per process."""

    settings: Settings
    facade: DocumentFacade
    repositories: Repositories
    storage: StorageService
    session: SessionContext
    use_cases: UseCases


def configure_logging(settings: Settings) -> None:
    logging.basicConfig(
        level=getattr(logging, settings.effective_log_level, logging.INFO),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )


def _build_identity_provider(settings: Settings, authorizer: Optional[Authorizer]) -> IdentityProvider:
    from marketplace.infrastructure.auth.supabase_auth import SupabaseIdentityProvider
    from marketplace.infrastructure.supabase_client import get_supabase_client
    return SupabaseIdentityProvider(
        get_supabase_client(),
        authorizer=authorizer,
        provider=settings.auth_provider,
        redirect_to=settings.auth_redirect_url
    )


def create_application(
    settings: Optional[Settings] = None,
    *,
    document_store: Optional[DocumentStore] = None,
    object_storage: Optional[ObjectStorage] = None,
    identity_provider: Optional[IdentityProvider] = None,
    authorizer: Optional[Authorizer] = None
) -> Marketplace:
    """
    Build the application container.

    Backends not passed explicitly are chosen from settings. The session
    starts in its loading state; call session.initialize() once the event
    loop is running to restore a persisted sign-in.
    """
    settings = settings or get_settings()
    configure_logging(settings)

    store = document_store or get_document_store(settings)
    facade = DocumentFacade(store)

    repositories = Repositories(
        users=UserProfileRepository(facade),
        projects=ProjectRepository(facade),
        applications=ApplicationRepository(facade),
        messages=MessageRepository(facade),
        comments=CommentRepository(facade),
        activities=ActivityRepository(facade),
        notifications=NotificationRepository(facade)
    )

    storage = StorageService(object_storage or get_object_storage(settings), settings)
    session = SessionContext(identity_provider or _build_identity_provider(settings, authorizer))

    use_cases = UseCases(
        dashboard_overview=GetDashboardOverviewUseCase(facade),
        list_projects_page=ListProjectsPageUseCase(repositories.projects),
        search_projects=SearchProjectsUseCase(repositories.projects),
        create_project=CreateProjectUseCase(session, repositories.projects, repositories.activities),
        apply_to_project=ApplyToProjectUseCase(
            session,
            repositories.projects,
            repositories.applications,
            repositories.activities
        )
    )

    logger.info(
        f"{settings.app_title} initialized "
        f"(documents: {type(store).__name__}, environment: {settings.environment})"
    )
    return Marketplace(
        settings=settings,
        facade=facade,
        repositories=repositories,
        storage=storage,
        session=session,
        use_cases=use_cases
    )
