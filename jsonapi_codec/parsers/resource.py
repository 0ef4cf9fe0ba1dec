"""Resource parser."""

from __future__ import annotations

from typing import Any

from jsonapi_codec.core.from_json import (
    FieldSpec,
    Member,
    Result,
    from_fields,
    object_from_json,
    string_from_json,
    type_error,
)
from jsonapi_codec.parsers import links, meta, relationships
from jsonapi_codec.schemas.resource import Action, Error, Resource, Sender

HUMAN_TYPE = "resource"
ATTRIBUTES_HUMAN_TYPE = "json object"


def attributes_from_json(json: Any, error_template: Error) -> Result:
    """Attributes are free-form, so any JSON object is accepted, but not ``null``."""
    if json is None:
        return type_error(error_template, ATTRIBUTES_HUMAN_TYPE)
    return object_from_json(json, error_template, ATTRIBUTES_HUMAN_TYPE)


def id_required(error_template: Error) -> bool:
    """Only a resource sent by a client to be created may omit ``id``."""
    template_meta = error_template.meta or {}
    return not (
        template_meta.get("action") == Action.CREATE
        and template_meta.get("sender") == Sender.CLIENT
    )


def field_specs(error_template: Error) -> tuple[FieldSpec, ...]:
    """Return the members of a resource for the template's action and sender."""
    return (
        FieldSpec("attributes", Member("attributes", from_json=attributes_from_json)),
        FieldSpec(
            "id",
            Member("id", required=id_required(error_template), from_json=string_from_json),
        ),
        FieldSpec("links", Member("links", from_json=links.from_json)),
        FieldSpec("meta", Member("meta", from_json=meta.from_json)),
        FieldSpec(
            "relationships", Member("relationships", from_json=relationships.from_json)
        ),
        FieldSpec("type", Member("type", required=True, from_json=string_from_json)),
    )


def from_json(json: Any, error_template: Error) -> Result:
    """Parse a resource object."""
    if not isinstance(json, dict):
        return type_error(error_template, HUMAN_TYPE)
    return from_fields(json, error_template, field_specs(error_template)).map(
        lambda fields: Resource(**fields)
    )
