"""
Infrastructure repositories module.
Contains document-store implementations of the domain repositories.
"""

from .base import DocumentRepository, MutableDocumentRepository
from .user_repository import UserProfileRepository
from .project_repository import ProjectRepository
from .application_repository import ApplicationRepository
from .message_repository import MessageRepository
from .comment_repository import CommentRepository
from .activity_repository import ActivityRepository
from .notification_repository import NotificationRepository

__all__ = [
    "DocumentRepository",
    "MutableDocumentRepository",
    "UserProfileRepository",
    "ProjectRepository",
    "ApplicationRepository",
    "MessageRepository",
    "CommentRepository",
    "ActivityRepository",
    "NotificationRepository",
]
