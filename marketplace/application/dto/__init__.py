"""
Application DTOs module.
Exports request and partial-update DTOs.
"""

from .base_dto import (
    BaseDTO,
    RequestDTO,
    CreateRequestDTO,
    UpdateRequestDTO,
    AttachmentDTO,
)
from .project_dto import (
    CreateProjectRequestDTO,
    ProjectUpdateDTO,
    ProjectSearchDTO,
    ProjectPageRequestDTO,
)
from .user_dto import SocialLinksDTO, UserProfileUpdateDTO, UserRoleUpdateDTO
from .application_dto import SubmitApplicationRequestDTO, ApplicationUpdateDTO
from .message_dto import MessageUpdateDTO, CommentUpdateDTO, NotificationUpdateDTO
from .dashboard_dto import DashboardRequestDTO

__all__ = [
    "BaseDTO",
    "RequestDTO",
    "CreateRequestDTO",
    "UpdateRequestDTO",
    "AttachmentDTO",
    "CreateProjectRequestDTO",
    "ProjectUpdateDTO",
    "ProjectSearchDTO",
    "ProjectPageRequestDTO",
    "SocialLinksDTO",
    "UserProfileUpdateDTO",
    "UserRoleUpdateDTO",
    "SubmitApplicationRequestDTO",
    "ApplicationUpdateDTO",
    "MessageUpdateDTO",
    "CommentUpdateDTO",
    "NotificationUpdateDTO",
    "DashboardRequestDTO",
]
