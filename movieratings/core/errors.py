"""
Error taxonomy shared by the repository and the API layer.

Every error maps to one HTTP status code and a single human readable
detail message, rendered as ``{"errors": {"detail": <message>}}``.
"""


class JsonApiError(Exception):
    """Base class for errors that are reported to API clients."""

    status_code = 500
    default_detail = "Internal Server Error"

    def __init__(self, detail: str | None = None):
        self.detail = detail or self.default_detail
        super().__init__(self.detail)

    def to_document(self) -> dict:
        return {"errors": {"detail": self.detail}}


class BadRequest(JsonApiError):
    """Malformed, missing or mismatched input."""

    status_code = 400
    default_detail = "Bad Request"


class NotFound(JsonApiError):
    """No resource matches the requested key."""

    status_code = 404
    default_detail = "Not Found"


class MethodNotAllowed(JsonApiError):
    """Known route, unsupported HTTP method."""

    status_code = 405
    default_detail = "Not Allowed"


class Conflict(JsonApiError):
    """The store rejected an insert because the key already exists."""

    status_code = 409
    default_detail = "Conflict"


class InternalError(JsonApiError):
    """Storage or connectivity fault."""

    status_code = 500
