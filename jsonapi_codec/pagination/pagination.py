"""Pagination metadata derived from pages, links and documents."""

from __future__ import annotations

from typing import Optional
from urllib.parse import urlsplit, urlunsplit

from pydantic import BaseModel, ConfigDict

from jsonapi_codec.core.errors import error_builder
from jsonapi_codec.core.exceptions import PageOutOfRangeError
from jsonapi_codec.pagination.page import Page
from jsonapi_codec.schemas.resource import Document, Link, Links

# Pagination field -> links member
LINKS_KEY_BY_FIELD = {
    "first": "first",
    "last": "last",
    "next": "next",
    "previous": "prev",
}

RECORD_COUNT = "record_count"


class Pagination(BaseModel):
    """Pages surrounding the current page of a paged collection.

    * ``first`` - the first page
    * ``last`` - the last page
    * ``next`` - the next page, unless the current page is the last
    * ``previous`` - the previous page, unless the current page is the first
    * ``total_size`` - the number of resources across all pages
    """

    model_config = ConfigDict(frozen=True)

    first: Optional[Page] = None
    last: Optional[Page] = None
    next: Optional[Page] = None
    previous: Optional[Page] = None
    total_size: Optional[int] = None

    def to_links(self, base_url: str) -> dict[str, str]:
        """Return ``first``/``last``/``next``/``prev`` links under ``base_url``."""
        split = urlsplit(base_url)
        links: dict[str, str] = {}
        for field, key in LINKS_KEY_BY_FIELD.items():
            page = getattr(self, field)
            if page is None:
                continue
            links[key] = urlunsplit(
                (split.scheme, split.netloc, split.path, page.to_query(), split.fragment)
            )
        return links


def to_pagination(page: Page, total_size: int) -> Pagination:
    """Return the pagination around ``page`` for ``total_size`` resources.

    Raises:
        PageOutOfRangeError: if ``page.number`` is past the last page.
    """
    count = Page.count(page.size, total_size)
    if page.number > count:
        error = error_builder.out_of_range(number=page.number, count=count)
        raise PageOutOfRangeError(error_builder.error_document([error]))

    next_page = None
    if page.number < count:
        next_page = Page(number=page.number + 1, size=page.size)
    previous_page = None
    if page.number > 1:
        previous_page = Page(number=page.number - 1, size=page.size)
    return Pagination(
        first=Page(number=1, size=page.size),
        last=Page(number=count, size=page.size),
        next=next_page,
        previous=previous_page,
        total_size=total_size,
    )


def link_to_page(link: str | Link) -> Optional[Page]:
    """Return the page addressed by a link's URL, if any."""
    href = link if isinstance(link, str) else link.href
    if href is None:
        return None
    return Page.from_uri(href)


def links_to_pagination(links: Optional[Links]) -> Optional[Pagination]:
    """Return the pagination encoded in pagination links.

    ``None`` when there are no links or none of them are pagination links.
    """
    if links is None:
        return None
    pages = {
        field: link_to_page(links[key])
        for field, key in LINKS_KEY_BY_FIELD.items()
        if key in links
    }
    if not any(pages.values()):
        return None
    return Pagination(**pages)


def document_to_pagination(document: Document) -> Optional[Pagination]:
    """Return the pagination of a paged document.

    A document supports pagination only when its ``meta`` has a
    ``"record_count"``; page links are read from ``links``.
    """
    if document.meta is None or RECORD_COUNT not in document.meta:
        return None
    total_size = document.meta[RECORD_COUNT]
    pagination = links_to_pagination(document.links)
    if pagination is None:
        return Pagination(total_size=total_size)
    return pagination.model_copy(update={"total_size": total_size})


def to_links(pagination: Optional[Pagination], base_url: str) -> Optional[dict[str, str]]:
    """Return the links for ``pagination`` or ``None`` without pagination."""
    if pagination is None:
        return None
    return pagination.to_links(base_url)
