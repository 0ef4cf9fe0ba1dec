"""Error object parser."""

from __future__ import annotations

from typing import Any

from jsonapi_codec.core.from_json import (
    FieldSpec,
    Member,
    Result,
    from_fields,
    string_from_json,
    type_error,
)
from jsonapi_codec.parsers import links, meta, source
from jsonapi_codec.schemas.resource import Error

HUMAN_TYPE = "error"

FIELD_SPECS = (
    FieldSpec("code", Member("code", from_json=string_from_json)),
    FieldSpec("detail", Member("detail", from_json=string_from_json)),
    FieldSpec("id", Member("id", from_json=string_from_json)),
    FieldSpec("links", Member("links", from_json=links.from_json)),
    FieldSpec("meta", Member("meta", from_json=meta.from_json)),
    FieldSpec("source", Member("source", from_json=source.from_json)),
    FieldSpec("status", Member("status", from_json=string_from_json)),
    FieldSpec("title", Member("title", from_json=string_from_json)),
)


def from_json(json: Any, error_template: Error) -> Result:
    """Parse an error object.  Every member is optional."""
    if not isinstance(json, dict):
        return type_error(error_template, HUMAN_TYPE)
    return from_fields(json, error_template, FIELD_SPECS).map(lambda fields: Error(**fields))
