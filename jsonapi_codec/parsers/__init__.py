"""Parsers for each node of the JSON:API document grammar."""

from .document import from_json as document_from_json
from .document import parse_document

__all__ = ["document_from_json", "parse_document"]
