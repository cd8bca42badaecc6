"""
Domain models for the freelance marketplace.
This module exports all domain entities, value objects and exceptions.
"""

# Base classes and exceptions
from .base import (
    BaseEntity,
    DomainException,
    ValidationError,
    BusinessRuleViolation,
    EntityNotFoundError,
    DataAccessError,
    ReadError,
    WriteError,
    DocumentNotFoundError,
    StorageError,
    UploadError,
    DownloadError,
    AuthError,
    utc_now
)

# Value objects
from .attachment import Attachment, AttachmentType
from .identity import Identity

# Domain entities
from .user import UserProfile, UserRole, SocialLinks
from .project import Project, ProjectStatus, ProjectSearchCriteria
from .application import Application, ApplicationStatus
from .message import Message
from .comment import Comment, CommentStatus
from .activity import Activity, ActivityType
from .notification import Notification, NotificationType

__all__ = [
    # Base
    "BaseEntity",
    "DomainException",
    "ValidationError",
    "BusinessRuleViolation",
    "EntityNotFoundError",
    "DataAccessError",
    "ReadError",
    "WriteError",
    "DocumentNotFoundError",
    "StorageError",
    "UploadError",
    "DownloadError",
    "AuthError",
    "utc_now",

    # Value objects
    "Attachment",
    "AttachmentType",
    "Identity",

    # Entities
    "UserProfile",
    "UserRole",
    "SocialLinks",
    "Project",
    "ProjectStatus",
    "ProjectSearchCriteria",
    "Application",
    "ApplicationStatus",
    "Message",
    "Comment",
    "CommentStatus",
    "Activity",
    "ActivityType",
    "Notification",
    "NotificationType",
]
