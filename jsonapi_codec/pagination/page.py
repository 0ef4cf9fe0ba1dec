"""Fixed-size pages addressed by ``page[number]`` and ``page[size]``."""

from __future__ import annotations

from typing import Any, Optional
from urllib.parse import parse_qsl, urlencode, urlsplit

from pydantic import BaseModel, ConfigDict, Field

from jsonapi_codec.config import get_settings

NUMBER_PARAMETER = "page[number]"
SIZE_PARAMETER = "page[size]"


def _default_size() -> int:
    return get_settings().default_page_size


def _to_integer(value: Any) -> Optional[int]:
    try:
        return int(value)
    except (TypeError, ValueError):
        return None


class Page(BaseModel):
    """A page of paged pagination.

    * ``number`` - the 1-based page number
    * ``size`` - the size of this page and all pages
    """

    model_config = ConfigDict(frozen=True)

    number: int = Field(default=1, ge=1)
    size: int = Field(default_factory=_default_size, ge=1)

    @staticmethod
    def count(size: int, total_size: int) -> int:
        """Number of pages of ``size`` needed for ``total_size`` resources.

        There is always at least one page, even when there are no resources.
        """
        return max(1, -(-total_size // size))

    @classmethod
    def from_query(cls, query: str) -> Optional["Page"]:
        """Extract the page from a URL query string.

        ``None`` unless both ``page[number]`` and ``page[size]`` are present as
        integers.
        """
        number = size = None
        for key, value in parse_qsl(query, keep_blank_values=True):
            if key == NUMBER_PARAMETER:
                number = _to_integer(value)
            elif key == SIZE_PARAMETER:
                size = _to_integer(value)
        if number is None or size is None or number < 1 or size < 1:
            return None
        return cls(number=number, size=size)

    @classmethod
    def from_uri(cls, uri: str) -> Optional["Page"]:
        """Extract the page from the query of ``uri``."""
        query = urlsplit(uri).query
        if not query:
            return None
        return cls.from_query(query)

    @classmethod
    def from_params(cls, params: dict[str, Any]) -> Optional["Page"]:
        """Extract the page from nested params like ``{"page": {"number": "2"}}``.

        A missing ``size`` falls back to the default page size.
        """
        page = params.get("page")
        if not isinstance(page, dict) or "number" not in page:
            return None
        number = _to_integer(page["number"])
        size = _to_integer(page.get("size", _default_size()))
        if number is None or size is None or number < 1 or size < 1:
            return None
        return cls(number=number, size=size)

    def to_params(self) -> dict[str, Any]:
        """Return the page as nested params."""
        return {"page": {"number": self.number, "size": self.size}}

    def to_query(self) -> str:
        """Return the page as the query portion of a URI."""
        return urlencode([(NUMBER_PARAMETER, self.number), (SIZE_PARAMETER, self.size)])
