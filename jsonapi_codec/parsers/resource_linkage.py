"""Resource linkage parser.

Resource linkage is one of:

* ``null`` for an empty to-one
* ``[]`` for an empty to-many
* a single object for a non-empty to-one
* an array of objects for a non-empty to-many

An object with ``attributes`` or ``relationships`` is a full resource (as sent
when creating related resources or in compound documents); any other object
is a resource identifier.
"""

from __future__ import annotations

from typing import Any

from jsonapi_codec.core.from_json import Ok, Result, from_json_array, type_error
from jsonapi_codec.parsers import resource_identifier
from jsonapi_codec.schemas.resource import Error

HUMAN_TYPE = "resource linkage"

RESOURCE_ONLY_MEMBERS = ("attributes", "relationships")


def is_resource(json: dict[str, Any]) -> bool:
    """Return True if ``json`` has members only resources can have."""
    return any(member in json for member in RESOURCE_ONLY_MEMBERS)


def resource_or_identifier_from_json(json: dict[str, Any], error_template: Error) -> Result:
    """Parse ``json`` as a resource or a resource identifier."""
    if is_resource(json):
        # resource -> relationships -> relationship -> resource linkage
        from jsonapi_codec.parsers import resource

        return resource.from_json(json, error_template)
    return resource_identifier.from_json(json, error_template)


def _element_from_json(json: Any, error_template: Error) -> Result:
    if isinstance(json, dict):
        return resource_or_identifier_from_json(json, error_template)
    return type_error(error_template, resource_identifier.HUMAN_TYPE)


def from_json(json: Any, error_template: Error) -> Result:
    """Parse resource linkage into ``None``, a single value or a list."""
    if json is None:
        return Ok(None)
    if isinstance(json, dict):
        return resource_or_identifier_from_json(json, error_template)
    if isinstance(json, list):
        return from_json_array(json, error_template, _element_from_json)
    return type_error(error_template, HUMAN_TYPE)
