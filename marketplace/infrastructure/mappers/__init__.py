"""
Document mappers module.
Converts between domain entities and stored documents.
"""

from .base import DocumentMapper, parse_datetime
from .user_mapper import UserProfileMapper
from .project_mapper import ProjectMapper
from .application_mapper import ApplicationMapper
from .message_mapper import MessageMapper
from .comment_mapper import CommentMapper
from .activity_mapper import ActivityMapper
from .notification_mapper import NotificationMapper

__all__ = [
    "DocumentMapper",
    "parse_datetime",
    "UserProfileMapper",
    "ProjectMapper",
    "ApplicationMapper",
    "MessageMapper",
    "CommentMapper",
    "ActivityMapper",
    "NotificationMapper",
]
