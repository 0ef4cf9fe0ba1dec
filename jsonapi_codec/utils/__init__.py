"""Header and query parameter helpers for JSON:API requests."""

from .content_negotiation import accepts_jsonapi, parse_jsonapi_media_type
from .query_params import parse_query_params

__all__ = ["accepts_jsonapi", "parse_jsonapi_media_type", "parse_query_params"]
