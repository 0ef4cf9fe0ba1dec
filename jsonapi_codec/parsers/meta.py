"""Meta object parser."""

from __future__ import annotations

from typing import Any

from jsonapi_codec.core.from_json import Result, object_from_json
from jsonapi_codec.schemas.resource import Error

HUMAN_TYPE = "meta object"


def from_json(json: Any, error_template: Error) -> Result:
    """Meta members are free-form, so any JSON object is accepted."""
    return object_from_json(json, error_template, HUMAN_TYPE)
