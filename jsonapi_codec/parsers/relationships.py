"""Relationships object parser."""

from __future__ import annotations

from typing import Any

from jsonapi_codec.core.from_json import Result, put_key, reduce, type_error
from jsonapi_codec.parsers import relationship
from jsonapi_codec.schemas.resource import Error

HUMAN_TYPE = "relationships object"


def from_json(json: Any, error_template: Error) -> Result:
    """Parse every named relationship; errors from all of them are kept.

    ``null`` is rejected: a resource without relationships leaves the member out.
    """
    if not isinstance(json, dict):
        return type_error(error_template, HUMAN_TYPE)
    return reduce(
        put_key(relationship.from_json(value, error_template.descend(name)), name)
        for name, value in json.items()
    )
