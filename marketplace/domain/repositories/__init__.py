"""
Repository interfaces for the domain layer.
This module exports the document store port and the typed repository interfaces.
"""

from .document_store import (
    DocumentStore,
    DocumentReference,
    FieldFilter,
    FilterOperator,
    SortDirection,
)
from .base import Repository, MutableRepository
from .user_repository import UserProfileRepositoryInterface
from .project_repository import ProjectRepositoryInterface
from .application_repository import ApplicationRepositoryInterface
from .message_repository import MessageRepositoryInterface
from .comment_repository import CommentRepositoryInterface
from .activity_repository import ActivityRepositoryInterface
from .notification_repository import NotificationRepositoryInterface

__all__ = [
    "DocumentStore",
    "DocumentReference",
    "FieldFilter",
    "FilterOperator",
    "SortDirection",
    "Repository",
    "MutableRepository",
    "UserProfileRepositoryInterface",
    "ProjectRepositoryInterface",
    "ApplicationRepositoryInterface",
    "MessageRepositoryInterface",
    "CommentRepositoryInterface",
    "ActivityRepositoryInterface",
    "NotificationRepositoryInterface",
]
