"""Core JSON:API document, error and extraction helpers."""

from .document import JSONAPIDocumentBuilder, error_status_consensus, included_resource_by_id_by_type
from .errors import JSONAPIErrorBuilder, error_builder
from .exceptions import (
    ExclusiveMembersError,
    JSONAPIError,
    JSONAPIValidationError,
    PageOutOfRangeError,
)
from .from_json import Err, Ok

__all__ = [
    "Err",
    "ExclusiveMembersError",
    "JSONAPIDocumentBuilder",
    "JSONAPIError",
    "JSONAPIErrorBuilder",
    "JSONAPIValidationError",
    "Ok",
    "PageOutOfRangeError",
    "error_builder",
    "error_status_consensus",
    "included_resource_by_id_by_type",
]
