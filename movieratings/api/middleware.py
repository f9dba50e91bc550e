"""
Content negotiation middleware for JSON:API requests.
"""

import logging

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from movieratings.api.responses import JSONAPI_MEDIA_TYPE, JsonApiResponse
from movieratings.core.errors import BadRequest

logger = logging.getLogger(__name__)


def is_jsonapi_content_type(value: str | None) -> bool:
    """True when a Content-Type header names the JSON:API media type."""
    if not value:
        return False
    media_type = value.split(";", 1)[0].strip().lower()
    return media_type == JSONAPI_MEDIA_TYPE


class JsonApiMiddleware(BaseHTTPMiddleware):
    """
    Reject requests that do not declare the JSON:API media type.

    Runs before routing, so the check applies to every path, known or not.
    """

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        if not is_jsonapi_content_type(request.headers.get("content-type")):
            logger.info("Rejected %s %s without JSON:API Content-Type", request.method, request.url.path)
            error = BadRequest()
            return JsonApiResponse(error.to_document(), status_code=error.status_code)
        return await call_next(request)
