"""Starlette responses carrying JSON:API documents."""

from __future__ import annotations

from typing import Any, Mapping, Optional

from starlette.responses import JSONResponse

from jsonapi_codec.config import get_settings
from jsonapi_codec.core.document import error_status_consensus
from jsonapi_codec.schemas.resource import Document
from jsonapi_codec.serializers.base import serializer


def document_response(
    document: Document,
    status_code: Optional[int] = None,
    headers: Optional[Mapping[str, str]] = None,
) -> JSONResponse:
    """Serialize ``document`` into a response with the JSON:API media type.

    Without an explicit ``status_code`` an error document answers with its
    error status consensus (falling back to the configured error status) and
    any other document with 200.
    """
    if status_code is None:
        status_code = 200
        if document.errors is not None:
            consensus = error_status_consensus(document) or get_settings().error_status
            status_code = int(consensus)
    content: Any = serializer.document(document)
    return JSONResponse(
        content,
        status_code=status_code,
        headers=dict(headers) if headers else None,
        media_type=get_settings().media_type,
    )
