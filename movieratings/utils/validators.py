"""
Request document validation for JSON:API resource objects.

Each endpoint declares the resource it accepts as a pydantic model deriving
from ``ResourceRequest`` (see ``movieratings.api.models.requests``). A single
routine, ``validate_resource``, runs the model against the loosely structured
request body and returns a ``ValidationResult`` instead of raising, so callers
decide how to report the failure.

Every failure reads "Bad Request"; clients never learn which field was wrong.
"""

import re
from dataclasses import dataclass, field
from typing import Annotated, Any, ClassVar, Dict, Mapping, Optional, Type

from pydantic import (
    AfterValidator,
    BaseModel,
    BeforeValidator,
    ConfigDict,
    Field,
    StrictInt,
    StrictStr,
    TypeAdapter,
    ValidationError,
    ValidationInfo,
    model_validator,
)


BAD_REQUEST = "Bad Request"

# Bounds of the store's INTEGER column
INT64_MIN = -2 ** 63
INT64_MAX = 2 ** 63 - 1

# Optional sign, no leading zeros, nothing after the last digit
_INTEGER_PATTERN = re.compile(r"^[+-]?(0|[1-9][0-9]*)$")


def _canonical_integer(value: Any) -> Any:
    if isinstance(value, str):
        text = value.strip()
        if not _INTEGER_PATTERN.match(text):
            raise ValueError(f"Not an integer: {value!r}")
        return int(text)
    return value


def _identifier_text(value: Any) -> Any:
    # Strict int rejects bool before it can be rendered as "True"
    if isinstance(value, int) and not isinstance(value, bool):
        return str(value)
    return value


def _present(value: Any) -> Any:
    if not value:
        raise ValueError("Value counts as missing")
    return value


# Strings must be plain base-10; bools and floats are rejected
Integer = Annotated[
    StrictInt,
    BeforeValidator(_canonical_integer),
    Field(ge=INT64_MIN, le=INT64_MAX),
]

Identifier = Annotated[StrictStr, BeforeValidator(_identifier_text)]

# Zero and the empty string fail a required field
RequiredInteger = Annotated[Integer, AfterValidator(_present)]
RequiredIdentifier = Annotated[Identifier, AfterValidator(_present)]

_INTEGER_ADAPTER = TypeAdapter(Integer)


class JsonApiModel(BaseModel):
    """Base for request document parts; unknown members are ignored."""

    model_config = ConfigDict(extra="ignore")


class RelatedResource(JsonApiModel):
    """
    Resource identifier inside ``relationships.<name>.data``.

    Subclasses pin ``type`` with a ``Literal`` and name the URL parameter the
    raw ``id`` must equal when the request addresses an existing resource.
    """

    path_param: ClassVar[Optional[str]] = None

    @model_validator(mode="before")
    @classmethod
    def check_path_id(cls, data: Any, info: ValidationInfo) -> Any:
        path_params = (info.context or {}).get("path_params")
        if path_params is None or cls.path_param is None:
            return data
        expected = path_params.get(cls.path_param)
        raw_id = data.get("id") if isinstance(data, Mapping) else None
        # "1" matches /1, but 1 and "01" do not
        if expected is None or not isinstance(raw_id, str) or raw_id != expected:
            raise ValueError(f"Related id does not match {cls.path_param}")
        return data


class ResourceRequest(JsonApiModel):
    """A ``{"data": {...}}`` request document that flattens to keyword params."""

    def to_params(self) -> Dict[str, Any]:
        raise NotImplementedError


@dataclass
class ValidationResult:
    """Outcome of validating one request document."""

    params: Dict[str, Any] = field(default_factory=dict)
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, params: Dict[str, Any]) -> "ValidationResult":
        return cls(params=params)

    @classmethod
    def failure(cls, error: str = BAD_REQUEST) -> "ValidationResult":
        return cls(error=error)


def coerce_integer(value: Any) -> int:
    """
    Coerce a value to ``int`` the way form/JSON input is sanitized.

    Booleans are rejected even though ``bool`` subclasses ``int``. Strings
    must be a plain base-10 integer; surrounding whitespace is ignored.
    Values outside the signed 64-bit range are rejected.

    Raises:
        ValueError: If the value is not an integer
    """
    try:
        return _INTEGER_ADAPTER.validate_python(value)
    except ValidationError as exc:
        raise ValueError(f"Not an integer: {value!r}") from exc


def validate_resource(
    document: Any,
    model: Type[ResourceRequest],
    path_params: Optional[Mapping[str, str]] = None,
) -> ValidationResult:
    """
    Validate a JSON:API request document against a request model.

    Args:
        document: Parsed request body, expected as ``{"data": {...}}``
        model: ``ResourceRequest`` subclass for the endpoint
        path_params: URL parameters to cross-check relationship ids against
            (PATCH endpoints); ``None`` skips the cross-check

    Returns:
        ValidationResult holding a flat mapping of field name to typed value,
        or a failure.
    """
    try:
        request = model.model_validate(document, context={"path_params": path_params})
    except ValidationError:
        return ValidationResult.failure()

    return ValidationResult.success(request.to_params())
