"""
Pydantic schemas for JSON:API documents.
"""

from typing import Any, Dict, List

from pydantic import BaseModel


class ResourceIdentifier(BaseModel):
    """Identifies a related resource."""

    type: str
    id: str


class Relationship(BaseModel):
    """To-one relationship member."""

    data: ResourceIdentifier


class MovieResource(BaseModel):
    """Movie resource; attributes are the stored payload, any JSON value."""

    type: str = "movies"
    id: str
    attributes: Any


class RatingResource(BaseModel):
    """Rating resource; ids and attribute values are strings."""

    type: str
    id: str
    attributes: Dict[str, str]
    relationships: Dict[str, Relationship]


class MovieDocument(BaseModel):
    """Top-level document holding one movie."""

    data: List[MovieResource]


class RatingDocument(BaseModel):
    """Top-level document holding one rating."""

    data: List[RatingResource]


class ErrorDetail(BaseModel):
    detail: str


class ErrorDocument(BaseModel):
    """Body of every error response."""

    errors: ErrorDetail
