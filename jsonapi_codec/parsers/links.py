"""Links object parser."""

from __future__ import annotations

from typing import Any

from jsonapi_codec.core.from_json import Ok, Result, put_key, reduce, type_error
from jsonapi_codec.parsers import link
from jsonapi_codec.schemas.resource import Error

HUMAN_TYPE = "links object"


def from_json(json: Any, error_template: Error) -> Result:
    """Parse every link of a links object.

    Link names are free-form, so an empty object is valid.  Errors from every
    invalid link are reported.
    """
    if json is None:
        return Ok(None)
    if not isinstance(json, dict):
        return type_error(error_template, HUMAN_TYPE)
    return reduce(
        put_key(link.from_json(value, error_template.descend(name)), name)
        for name, value in json.items()
    )
