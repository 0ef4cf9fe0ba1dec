"""FastAPI dependencies decoding JSON:API requests."""

import logging
from typing import Any, Union

from fastapi import Request

from jsonapi_codec.core.errors import error_builder
from jsonapi_codec.core.exceptions import JSONAPIValidationError
from jsonapi_codec.parsers.document import parse_document
from jsonapi_codec.schemas.resource import Action, Document, Sender, Source
from jsonapi_codec.utils.query_params import parse_query_params

logger = logging.getLogger(__name__)


class JSONAPIBody:
    """Dependency returning the request body as a validated ``Document``.

    Usage:
        @app.post("/articles")
        async def create(document: Document = Depends(JSONAPIBody(action=Action.CREATE))):
            ...

    A body that is not JSON raises ``JSONAPIValidationError`` with a single
    400 error; a body that is not a valid document raises it with every
    grammar error found.
    """

    def __init__(
        self, *, action: Union[Action, str], sender: Union[Sender, str] = Sender.CLIENT
    ) -> None:
        self.action = Action(action)
        self.sender = Sender(sender)

    async def __call__(self, request: Request) -> Document:
        try:
            json: Any = await request.json()
        except ValueError:
            logger.debug("Request body of %s is not JSON", request.url.path)
            error = error_builder.error_object(
                status="400",
                title="Malformed JSON",
                detail="Request body is not valid JSON",
                source=Source(pointer=""),
            )
            raise JSONAPIValidationError(error_builder.error_document([error])) from None
        return parse_document(json, action=self.action, sender=self.sender)


class JSONAPIQuery:
    """Dependency returning the normalized JSON:API query parameters."""

    def __call__(self, request: Request) -> dict[str, Any]:
        return parse_query_params(request.query_params)
