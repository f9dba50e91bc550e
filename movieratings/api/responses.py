"""
Response class serving the JSON:API media type.
"""

from fastapi.responses import JSONResponse

JSONAPI_MEDIA_TYPE = "application/vnd.api+json"


class JsonApiResponse(JSONResponse):
    """Compact JSON body served as ``application/vnd.api+json``."""

    media_type = JSONAPI_MEDIA_TYPE
