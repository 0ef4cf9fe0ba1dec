"""Paged JSON:API pagination using page[number]/page[size]."""

from __future__ import annotations

from typing import Any

from jsonapi_codec.pagination.base import PaginationBase
from jsonapi_codec.pagination.page import Page
from jsonapi_codec.pagination.pagination import RECORD_COUNT, to_pagination


class StandardPagination(PaginationBase):
    """page[number]/page[size] pagination.

    The links and meta it produces can be read back with
    :func:`jsonapi_codec.pagination.pagination.document_to_pagination`.
    """

    def paginate(self, items: list[Any], page: Page) -> list[Any]:
        """Return the items on ``page``."""
        offset = (page.number - 1) * page.size
        return items[offset : offset + page.size]

    def get_links(self, *, total: int, page: Page, base_url: str) -> dict[str, str]:
        """Build pagination links for ``page``.

        Raises:
            PageOutOfRangeError: if ``page`` is past the last page.
        """
        return to_pagination(page, total).to_links(base_url)

    def get_meta(self, *, total: int, page: Page) -> dict[str, Any]:
        """Build pagination metadata with the total record count."""
        return {RECORD_COUNT: total}
