"""JSON:API error handling middleware."""

from __future__ import annotations

import logging
from typing import Any

from jsonapi_codec.core.errors import error_builder
from jsonapi_codec.core.exceptions import JSONAPIValidationError
from jsonapi_codec.responses import document_response

logger = logging.getLogger(__name__)


class ErrorHandlerMiddleware:
    """Convert exceptions into JSON:API error documents.

    ``JSONAPIValidationError`` answers with its own error document; anything
    else is logged and answers with a generic 500 error document.
    """

    def __init__(self, app: Any) -> None:
        """Store the ASGI app for middleware chaining."""
        self.app = app

    async def __call__(self, scope: dict[str, Any], receive: Any, send: Any) -> None:
        """Handle exceptions and serialize JSON:API error documents."""
        if scope.get("type") != "http":
            await self.app(scope, receive, send)
            return
        try:
            await self.app(scope, receive, send)
        except JSONAPIValidationError as exc:
            response = document_response(exc.document)
            await response(scope, receive, send)
        except Exception as exc:  # noqa: BLE001
            logger.exception("Unhandled error while serving %s", scope.get("path"))
            error = error_builder.error_object(
                status="500", title="Internal Server Error", detail=str(exc) or None
            )
            response = document_response(error_builder.error_document([error]), 500)
            await response(scope, receive, send)
