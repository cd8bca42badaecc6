"""
Application mapper for converting between domain entities and documents.
"""

from typing import Any, Dict

from marketplace.domain.models.application import Application, ApplicationStatus
from marketplace.infrastructure.mappers.base import (
    DocumentMapper,
    attachments_from_documents,
    attachments_to_documents,
    parse_datetime,
)


class ApplicationMapper(DocumentMapper[Application]):
    """Maps between Application and its document in the applications collection."""

    def to_document(self, application: Application) -> Dict[str, Any]:
        return {
            "project_id": application.project_id,
            "user_id": application.user_id,
            "proposal": application.proposal,
            "attachments": attachments_to_documents(application.attachments),
            "status": application.status.value,
            "submitted_at": application.submitted_at
        }

    def _build(self, document: Dict[str, Any]) -> Application:
        return Application(
            project_id=document.get("project_id", ""),
            user_id=document.get("user_id", ""),
            proposal=document.get("proposal", ""),
            attachments=attachments_from_documents(document.get("attachments")),
            status=ApplicationStatus(document.get("status") or ApplicationStatus.PENDING.value),
            submitted_at=parse_datetime(document.get("submitted_at"))
        )
