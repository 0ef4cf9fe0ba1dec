"""Reflection of pydantic validation errors as JSON:API errors."""

from __future__ import annotations

from typing import Collection, Mapping, Optional

from pydantic import ValidationError

from jsonapi_codec.config import get_settings
from jsonapi_codec.schemas.resource import Document, Error, Source

ATTRIBUTES_POINTER = "/data/attributes"
RELATIONSHIPS_POINTER = "/data/relationships"


def _source(
    field: Optional[str],
    attributes: Collection[str],
    relationships: Collection[str],
    foreign_keys: Mapping[str, str],
) -> Optional[Source]:
    if field is None:
        return None
    if field in attributes:
        return Source(pointer=f"{ATTRIBUTES_POINTER}/{field}")
    if field in relationships:
        return Source(pointer=f"{RELATIONSHIPS_POINTER}/{field}")
    if field in foreign_keys:
        return Source(pointer=f"{RELATIONSHIPS_POINTER}/{foreign_keys[field]}")
    return None


def errors_from_validation_error(
    exc: ValidationError,
    *,
    attributes: Collection[str] = (),
    relationships: Collection[str] = (),
    foreign_keys: Optional[Mapping[str, str]] = None,
) -> list[Error]:
    """Convert each error of a pydantic ``ValidationError`` into an ``Error``.

    The first element of an error's ``loc`` names the field.  Fields listed in
    ``attributes`` point into ``/data/attributes``; fields listed in
    ``relationships`` or mapped by ``foreign_keys`` (``{"author_id":
    "author"}``) point into ``/data/relationships``.  ``foreign_keys``
    defaults to ``"<name>_id"`` for every relationship name.  Other fields
    have no ``source``.
    """
    if foreign_keys is None:
        foreign_keys = {f"{name}_id": name for name in relationships}
    status = get_settings().error_status
    errors: list[Error] = []
    for details in exc.errors():
        loc = details.get("loc") or ()
        field = str(loc[0]) if loc else None
        message = details["msg"]
        errors.append(
            Error(
                title=message,
                detail=f"{field} {message}" if field is not None else message,
                source=_source(field, attributes, relationships, foreign_keys),
                status=status,
            )
        )
    return errors


def validation_error_document(exc: ValidationError, **kwargs) -> Document:
    """Return an error document for ``exc``; see ``errors_from_validation_error``."""
    return Document(errors=errors_from_validation_error(exc, **kwargs))
