"""Pydantic schemas for JSON:API."""

from .resource import (
    UNSET,
    Action,
    Document,
    Error,
    Link,
    Links,
    Relationship,
    Resource,
    ResourceIdentifier,
    ResourceLinkage,
    Sender,
    Source,
    Unset,
)
from .validation import errors_from_validation_error, validation_error_document

__all__ = [
    "UNSET",
    "Action",
    "Document",
    "Error",
    "Link",
    "Links",
    "Relationship",
    "Resource",
    "ResourceIdentifier",
    "ResourceLinkage",
    "Sender",
    "Source",
    "Unset",
    "errors_from_validation_error",
    "validation_error_document",
]
