"""JSON:API content negotiation middleware."""

from __future__ import annotations

import logging
from typing import Any

from jsonapi_codec.config import get_settings
from jsonapi_codec.core.errors import error_builder
from jsonapi_codec.responses import document_response
from jsonapi_codec.utils.content_negotiation import accepts_jsonapi, parse_jsonapi_media_type

logger = logging.getLogger(__name__)


class ContentNegotiationMiddleware:
    """Ensure JSON:API media type for requests and responses."""

    def __init__(self, app: Any) -> None:
        """Store the ASGI app for middleware chaining."""
        self.app = app

    async def __call__(self, scope: dict[str, Any], receive: Any, send: Any) -> None:
        """Validate JSON:API headers before passing to downstream app."""
        if scope.get("type") != "http":
            await self.app(scope, receive, send)
            return

        media_type = get_settings().media_type
        method = scope.get("method", "").upper()
        headers = {k.decode().lower(): v.decode() for k, v in scope.get("headers", [])}
        content_type = headers.get("content-type", "")
        accept = headers.get("accept", "")

        if method in {"POST", "PATCH"}:
            parsed = parse_jsonapi_media_type(content_type)
            if parsed["media_type"] != media_type or parsed.get("other_params"):
                logger.debug("Rejected request with Content-Type %r", content_type)
                await self._reject(
                    scope,
                    receive,
                    send,
                    status="415",
                    title="Unsupported Media Type",
                    detail=f"Content-Type must be `{media_type}` without media type parameters",
                )
                return

        if not accepts_jsonapi(accept, media_type):
            logger.debug("Rejected request with Accept %r", accept)
            await self._reject(
                scope,
                receive,
                send,
                status="406",
                title="Not Acceptable",
                detail=f"Accept must allow `{media_type}`",
            )
            return

        await self.app(scope, receive, send)

    @staticmethod
    async def _reject(
        scope: dict[str, Any], receive: Any, send: Any, *, status: str, title: str, detail: str
    ) -> None:
        error = error_builder.error_object(status=status, title=title, detail=detail)
        response = document_response(error_builder.error_document([error]), int(status))
        await response(scope, receive, send)
