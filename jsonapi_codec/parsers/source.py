"""Error source parser."""

from __future__ import annotations

from typing import Any

from jsonapi_codec.core.errors import error_builder
from jsonapi_codec.core.from_json import (
    Err,
    FieldSpec,
    Member,
    Result,
    from_fields,
    string_from_json,
    type_error,
)
from jsonapi_codec.schemas.resource import Error, Source

HUMAN_TYPE = "source"

EXCLUSIVE_CHILDREN = ("parameter", "pointer")

FIELD_SPECS = (
    FieldSpec("parameter", Member("parameter", from_json=string_from_json)),
    FieldSpec("pointer", Member("pointer", from_json=string_from_json)),
)


def from_json(json: Any, error_template: Error) -> Result:
    """Parse a source object holding either ``parameter`` or ``pointer``."""
    if not isinstance(json, dict):
        return type_error(error_template, HUMAN_TYPE)
    if all(child in json for child in EXCLUSIVE_CHILDREN):
        return Err((error_builder.conflicting(error_template, EXCLUSIVE_CHILDREN),))
    return from_fields(json, error_template, FIELD_SPECS).map(lambda fields: Source(**fields))
