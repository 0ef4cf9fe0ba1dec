"""Helpers for JSON:API query parameter parsing."""

from __future__ import annotations

from typing import Any, Mapping

from jsonapi_codec.fetch import includes_from_string, sorts_from_string
from jsonapi_codec.pagination.page import NUMBER_PARAMETER, SIZE_PARAMETER, Page


def _split_csv(value: str) -> list[str]:
    return [item for item in (part.strip() for part in value.split(",")) if item]


def parse_query_params(params: Mapping[str, Any]) -> dict[str, Any]:
    """Normalize JSON:API query parameter families.

    Returns ``include`` (includes), ``sort`` (``Sort`` values), ``fields``
    (sparse fieldsets by type) and ``page`` (a ``Page`` or ``None``).
    """
    normalized: dict[str, Any] = {
        "include": [],
        "fields": {},
        "sort": [],
        "page": None,
    }
    page: dict[str, Any] = {}

    for key, value in params.items():
        if value is None:
            continue
        raw_value = str(value)
        if key == "include":
            normalized["include"] = includes_from_string(raw_value)
        elif key.startswith("fields[") and key.endswith("]"):
            resource_type = key[len("fields[") : -1]
            normalized["fields"][resource_type] = _split_csv(raw_value)
        elif key == "sort":
            normalized["sort"] = sorts_from_string(raw_value)
        elif key == NUMBER_PARAMETER:
            page["number"] = raw_value
        elif key == SIZE_PARAMETER:
            page["size"] = raw_value

    normalized["page"] = Page.from_params({"page": page})
    return normalized
