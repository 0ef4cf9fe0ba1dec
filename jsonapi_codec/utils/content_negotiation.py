"""Helpers for JSON:API content negotiation."""

from __future__ import annotations

from typing import Any

JSONAPI_PARAMETERS = frozenset({"ext", "profile"})
WILDCARDS = frozenset({"*/*", "application/*"})


def _split_parameters(value: str) -> list[str]:
    return [part.strip() for part in value.split(";") if part.strip()]


def _parse_param_value(value: str) -> list[str]:
    value = value.strip('"')
    return value.split(" ") if value else []


def parse_jsonapi_media_type(content_type: str) -> dict[str, Any]:
    """Split a media type into ``media_type``, ``ext``, ``profile`` and ``other_params``.

    ``other_params`` is only present when the media type carries parameters
    JSON:API does not define, which servers must reject.
    """
    media_type, *parameters = _split_parameters(content_type) or [""]
    parsed: dict[str, Any] = {"media_type": media_type.lower(), "ext": [], "profile": []}

    for parameter in parameters:
        name, separator, raw_value = parameter.partition("=")
        if not separator:
            continue
        name = name.strip().lower()
        if name in JSONAPI_PARAMETERS:
            parsed[name] = _parse_param_value(raw_value.strip())
        else:
            parsed.setdefault("other_params", {})[name] = raw_value.strip()
    return parsed


def accepts_jsonapi(accept: str, media_type: str) -> bool:
    """Return True if an ``Accept`` header allows ``media_type`` responses.

    An empty header accepts anything.  A JSON:API entry only counts when it
    carries no parameters other than ``ext`` and ``profile``; the ``q``
    weight is ignored.
    """
    if not accept.strip():
        return True
    for entry in accept.split(","):
        parsed = parse_jsonapi_media_type(entry)
        if parsed["media_type"] in WILDCARDS:
            return True
        other_params = dict(parsed.get("other_params", {}))
        other_params.pop("q", None)
        if parsed["media_type"] == media_type and not other_params:
            return True
    return False
