"""Resource identifier parser."""

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
from jsonapi_codec.parsers import meta
from jsonapi_codec.schemas.resource import Error, ResourceIdentifier

HUMAN_TYPE = "resource identifier"

FIELD_SPECS = (
    FieldSpec("id", Member("id", required=True, from_json=string_from_json)),
    FieldSpec("meta", Member("meta", from_json=meta.from_json)),
    FieldSpec("type", Member("type", required=True, from_json=string_from_json)),
)


def from_json(json: Any, error_template: Error) -> Result:
    """Parse a resource identifier; both ``type`` and ``id`` are required."""
    if not isinstance(json, dict):
        return type_error(error_template, HUMAN_TYPE)
    return from_fields(json, error_template, FIELD_SPECS).map(
        lambda fields: ResourceIdentifier(**fields)
    )
