"""Relationship parser."""

from __future__ import annotations

from typing import Any

from jsonapi_codec.core.from_json import (
    FieldSpec,
    Member,
    Result,
    from_fields,
    type_error,
    validate_minimum_children,
)
from jsonapi_codec.parsers import links, meta, resource_linkage
from jsonapi_codec.schemas.resource import Error, Relationship

HUMAN_TYPE = "relationship"

MINIMUM_CHILDREN = ("data", "links", "meta")

FIELD_SPECS = (
    FieldSpec("data", Member("data", from_json=resource_linkage.from_json)),
    FieldSpec("links", Member("links", from_json=links.from_json)),
    FieldSpec("meta", Member("meta", from_json=meta.from_json)),
)


def from_json(json: Any, error_template: Error) -> Result:
    """Parse a relationship object.

    An absent ``data`` member leaves the relationship's data ``UNSET``, which
    is not the same as ``"data": null``.
    """
    if not isinstance(json, dict):
        return type_error(error_template, HUMAN_TYPE)
    collected = from_fields(json, error_template, FIELD_SPECS)
    collected = validate_minimum_children(collected, json, error_template, MINIMUM_CHILDREN)
    return collected.map(lambda fields: Relationship(**fields))
