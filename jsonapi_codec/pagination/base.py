"""Pagination base class for JSON:API links and meta."""

from typing import Any

from jsonapi_codec.pagination.page import Page


class PaginationBase:
    """Define pagination API for JSON:API."""

    def paginate(self, items: list[Any], page: Page) -> list[Any]:
        """Return the slice of items on ``page``."""
        raise NotImplementedError

    def get_links(self, *, total: int, page: Page, base_url: str) -> dict[str, str]:
        """Return JSON:API pagination links."""
        raise NotImplementedError

    def get_meta(self, *, total: int, page: Page) -> dict[str, Any]:
        """Return JSON:API pagination metadata."""
        raise NotImplementedError
