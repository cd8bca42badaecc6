"""
Project mapper for converting between domain entities and documents.
"""

from typing import Any, Dict

from marketplace.domain.models.project import Project, ProjectStatus
from marketplace.infrastructure.mappers.base import (
    DocumentMapper,
    attachments_from_documents,
    attachments_to_documents,
    parse_datetime,
)


class ProjectMapper(DocumentMapper[Project]):
    """Maps between Project and its document in the projects collection."""

    def to_document(self, project: Project) -> Dict[str, Any]:
        return {
            "title": project.title,
            "description": project.description,
            "budget": project.budget,
            "status": project.status.value,
            "created_by": project.created_by,
            "deadline": project.deadline,
            "category": project.category,
            "tags": list(project.tags),
            "attachments": attachments_to_documents(project.attachments)
        }

    def _build(self, document: Dict[str, Any]) -> Project:
        return Project(
            title=document.get("title", ""),
            description=document.get("description", ""),
            budget=float(document.get("budget") or 0.0),
            status=ProjectStatus(document.get("status") or ProjectStatus.OPEN.value),
            created_by=document.get("created_by", ""),
            deadline=parse_datetime(document.get("deadline")),
            category=document.get("category"),
            tags=list(document.get("tags") or []),
            attachments=attachments_from_documents(document.get("attachments"))
        )
