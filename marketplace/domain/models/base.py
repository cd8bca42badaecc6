"""
Base entity and exceptions for the domain layer.
This module contains the foundational classes for all domain entities.
"""

from datetime import datetime, timezone
from typing import Optional, Any, Dict
from abc import ABC
from dataclasses import dataclass, fields
from enum import Enum


def utc_now() -> datetime:
    """Current time as a timezone-aware UTC datetime."""
    return datetime.now(timezone.utc)


def ensure_utc(value: datetime) -> datetime:
    """Treat a naive datetime as UTC; aware datetimes are returned unchanged."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


@dataclass
class BaseEntity(ABC):
    """
    Base class for all persisted entities.
    The store assigns id and the data-access layer stamps the timestamps,
    so all three stay None until the entity has been written.
    """

    id: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @property
    def is_new(self) -> bool:
        """Check if entity is new (not persisted)."""
        return self.id is None

    def validate(self) -> None:
        """
        Validate the entity's state.
        Should be overridden by subclasses to implement specific validation rules.
        Raises ValidationError if the entity is in an invalid state.
        """
        pass

    def to_dict(self) -> Dict[str, Any]:
        """Convert entity to dictionary representation."""
        data = {}
        for entity_field in fields(self):
            data[entity_field.name] = _to_plain(getattr(self, entity_field.name))
        return data


def _to_plain(value: Any) -> Any:
    if isinstance(value, datetime):
        return value.isoformat()
    if isinstance(value, Enum):
        return value.value
    if hasattr(value, "to_dict"):
        return value.to_dict()
    if isinstance(value, list):
        return [_to_plain(item) for item in value]
    return value


def require_text(value: Optional[str], field_name: str, label: str) -> None:
    """Raise ValidationError when a required text field is blank."""
    if not value or not value.strip():
        raise ValidationError(f"{label} is required", field_name)


class DomainException(Exception):
    """Base exception for domain errors."""

    def __init__(self, message: str, code: Optional[str] = None):
        self.message = message
        self.code = code or self.__class__.__name__
        super().__init__(self.message)


class ValidationError(DomainException):
    """Exception raised when entity or payload validation fails."""

    def __init__(self, message: str, field: Optional[str] = None):
        super().__init__(message, "VALIDATION_ERROR")
        self.field = field


class BusinessRuleViolation(DomainException):
    """Exception raised when a business rule is violated."""

    def __init__(self, message: str):
        super().__init__(message, "BUSINESS_RULE_VIOLATION")


class EntityNotFoundError(DomainException):
    """Exception raised when an entity is not found."""

    def __init__(self, entity_type: str, entity_id: Any):
        message = f"{entity_type} with id {entity_id} not found"
        super().__init__(message, "ENTITY_NOT_FOUND")
        self.entity_type = entity_type
        self.entity_id = entity_id


# Data access

class DataAccessError(DomainException):
    """Base exception for document store failures."""

    def __init__(self, message: str, collection: Optional[str] = None, code: Optional[str] = None):
        super().__init__(message, code)
        self.collection = collection


class ReadError(DataAccessError):
    """Raised when reading from the document store fails."""

    def __init__(self, message: str, collection: Optional[str] = None):
        super().__init__(message, collection, "READ_ERROR")


class WriteError(DataAccessError):
    """Raised when writing to the document store fails."""

    def __init__(self, message: str, collection: Optional[str] = None, code: Optional[str] = None):
        super().__init__(message, collection, code or "WRITE_ERROR")


class DocumentNotFoundError(WriteError):
    """Raised when an update targets a document that does not exist."""

    def __init__(self, collection: str, document_id: str):
        super().__init__(
            f"No document with id {document_id} in {collection}",
            collection,
            "DOCUMENT_NOT_FOUND"
        )
        self.document_id = document_id


# Object storage

class StorageError(DomainException):
    """Base exception for object storage failures."""

    def __init__(self, message: str, path: Optional[str] = None, code: Optional[str] = None):
        super().__init__(message, code or "STORAGE_ERROR")
        self.path = path


class UploadError(StorageError):
    """Raised when an upload fails or is cancelled."""

    def __init__(self, message: str, path: Optional[str] = None):
        super().__init__(message, path, "UPLOAD_ERROR")


class DownloadError(StorageError):
    """Raised when a stored file cannot be resolved or fetched."""

    def __init__(self, message: str, path: Optional[str] = None):
        super().__init__(message, path, "DOWNLOAD_ERROR")


# Identity

class AuthError(DomainException):
    """Raised when the identity provider rejects or fails an operation."""

    def __init__(self, message: str, code: Optional[str] = None):
        super().__init__(message, code or "AUTH_ERROR")
