"""Document parser: the entry point for decoding JSON:API documents."""

from __future__ import annotations

import logging
from typing import Any

from jsonapi_codec.core.errors import error_builder
from jsonapi_codec.core.exceptions import JSONAPIValidationError
from jsonapi_codec.core.from_json import (
    Err,
    FieldSpec,
    Member,
    Result,
    from_fields,
    from_json_array,
    merge,
    object_from_json,
    type_error,
    validate_minimum_children,
)
from jsonapi_codec.parsers import error, links, meta, resource, resource_linkage
from jsonapi_codec.schemas.resource import Action, Document, Error, Sender

logger = logging.getLogger(__name__)

HUMAN_TYPE = "document"
JSONAPI_HUMAN_TYPE = "jsonapi object"

MINIMUM_CHILDREN = ("data", "errors", "meta")
DATA_EXCLUSIVE_CHILDREN = ("data", "errors")
INCLUDED_EXCLUSIVE_CHILDREN = ("errors", "included")


def errors_from_json(json: Any, error_template: Error) -> Result:
    """``errors`` must be an array of error objects."""
    return from_json_array(json, error_template, error.from_json)


def included_from_json(json: Any, error_template: Error) -> Result:
    """``included`` must be an array of full resources."""
    return from_json_array(json, error_template, resource.from_json)


def jsonapi_from_json(json: Any, error_template: Error) -> Result:
    return object_from_json(json, error_template, JSONAPI_HUMAN_TYPE)


def validate_exclusive_members(
    collected: Result, json: dict[str, Any], error_template: Error
) -> Result:
    """Add errors for ``data`` next to ``errors`` and for ``included`` without ``data``."""
    errors: list[Error] = []
    if "data" in json and "errors" in json:
        errors.append(error_builder.conflicting(error_template, DATA_EXCLUSIVE_CHILDREN))
    if "included" in json:
        if "errors" in json:
            errors.append(error_builder.conflicting(error_template, INCLUDED_EXCLUSIVE_CHILDREN))
        elif "data" not in json:
            errors.append(error_builder.missing(error_template, "data"))
    if not errors:
        return collected
    return merge(collected, Err(tuple(errors)))


FIELD_SPECS = (
    FieldSpec("errors", Member("errors", from_json=errors_from_json)),
    FieldSpec("included", Member("included", from_json=included_from_json)),
    FieldSpec("data", Member("data", from_json=resource_linkage.from_json)),
    FieldSpec("jsonapi", Member("jsonapi", from_json=jsonapi_from_json)),
    FieldSpec("links", Member("links", from_json=links.from_json)),
    FieldSpec("meta", Member("meta", from_json=meta.from_json)),
)


def from_json(json: Any, error_template: Error) -> Result:
    """Parse a top-level document.

    At least one of ``data``, ``errors`` or ``meta`` must be present.  An
    absent ``data`` member leaves ``Document.data`` ``UNSET``; ``"data": null``
    gives ``None``.  ``data`` and ``errors`` conflict, and ``included`` is only
    allowed next to ``data``.
    """
    if not isinstance(json, dict):
        return type_error(error_template, HUMAN_TYPE)
    collected = from_fields(json, error_template, FIELD_SPECS)
    collected = validate_exclusive_members(collected, json, error_template)
    collected = validate_minimum_children(collected, json, error_template, MINIMUM_CHILDREN)
    return collected.map(lambda fields: Document(**fields))


def parse_document(
    json: Any,
    *,
    action: Action | str | None = None,
    sender: Sender | str | None = None,
) -> Document:
    """Return the document decoded from ``json``.

    Raises:
        JSONAPIValidationError: carrying the error document with every problem
            found in ``json``.
    """
    result = from_json(json, error_builder.template(action=action, sender=sender))
    if isinstance(result, Err):
        logger.debug("Rejected JSON:API document with %d error(s)", len(result.errors))
        raise JSONAPIValidationError(result.to_document())
    return result.value
