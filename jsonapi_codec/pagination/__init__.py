"""Paged pagination for JSON:API."""

from .base import PaginationBase
from .page import Page
from .pagination import (
    Pagination,
    document_to_pagination,
    link_to_page,
    links_to_pagination,
    to_links,
    to_pagination,
)
from .standard import StandardPagination

__all__ = [
    "Page",
    "Pagination",
    "PaginationBase",
    "StandardPagination",
    "document_to_pagination",
    "link_to_page",
    "links_to_pagination",
    "to_links",
    "to_pagination",
]
