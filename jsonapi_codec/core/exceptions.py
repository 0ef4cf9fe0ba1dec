"""Exceptions raised by the JSON:API codec."""

from __future__ import annotations

from typing import Any

from jsonapi_codec.schemas.resource import Document, Error


class JSONAPIError(Exception):
    """Base class for codec exceptions."""


class JSONAPIValidationError(JSONAPIError):
    """Raised when input does not conform to the JSON:API grammar.

    ``document`` is the complete error document; it lists every problem found,
    not only the first.
    """

    def __init__(self, document: Document) -> None:
        self.document = document
        count = len(document.errors or [])
        super().__init__(f"JSON:API document has {count} error(s).")

    @property
    def errors(self) -> list[Error]:
        """Return the errors of the error document."""
        return list(self.document.errors or [])


class PageOutOfRangeError(JSONAPIValidationError):
    """Raised when a page number is past the last page."""


class ExclusiveMembersError(JSONAPIError, ValueError):
    """Raised when encoding a value whose exclusive members are both set.

    This signals a bug in how the value was built, not bad external input.
    """

    def __init__(self, first: str, first_value: Any, second: str, second_value: Any) -> None:
        super().__init__(
            f"`{first}` and `{second}` is exclusive in JSON API, but both are set: "
            f"{first} is `{first_value!r}` and {second} is `{second_value!r}`"
        )
