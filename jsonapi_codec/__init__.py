"""JSON:API v1.0 document codec for FastAPI and SQLAlchemy applications."""

from .core.document import JSONAPIDocumentBuilder, error_status_consensus
from .core.errors import JSONAPIErrorBuilder, error_builder
from .core.exceptions import (
    ExclusiveMembersError,
    JSONAPIError,
    JSONAPIValidationError,
    PageOutOfRangeError,
)
from .params import to_params
from .parsers import document_from_json, parse_document
from .schemas import (
    UNSET,
    Action,
    Document,
    Error,
    Link,
    Relationship,
    Resource,
    ResourceIdentifier,
    Sender,
    Source,
)
from .serializers.base import JSONAPISerializer, serializer

__all__ = [
    "UNSET",
    "Action",
    "Document",
    "Error",
    "ExclusiveMembersError",
    "JSONAPIDocumentBuilder",
    "JSONAPIError",
    "JSONAPIErrorBuilder",
    "JSONAPISerializer",
    "JSONAPIValidationError",
    "Link",
    "PageOutOfRangeError",
    "Relationship",
    "Resource",
    "ResourceIdentifier",
    "Sender",
    "Source",
    "document_from_json",
    "error_builder",
    "error_status_consensus",
    "parse_document",
    "serializer",
    "to_params",
]
