"""Link parser."""

from __future__ import annotations

from typing import Any

from jsonapi_codec.core.from_json import (
    FieldSpec,
    Member,
    Ok,
    Result,
    from_fields,
    string_from_json,
    type_error,
)
from jsonapi_codec.parsers import meta
from jsonapi_codec.schemas.resource import Error, Link

HUMAN_TYPE = "link object"

FIELD_SPECS = (
    FieldSpec("href", Member("href", from_json=string_from_json)),
    FieldSpec("meta", Member("meta", from_json=meta.from_json)),
)


def from_json(json: Any, error_template: Error) -> Result:
    """A link is either a URL string or a link object with ``href``/``meta``."""
    if isinstance(json, str):
        return Ok(json)
    if isinstance(json, dict):
        return from_fields(json, error_template, FIELD_SPECS).map(lambda fields: Link(**fields))
    return type_error(error_template, HUMAN_TYPE)
