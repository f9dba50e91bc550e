"""
Pydantic schemas for JSON:API request/response documents.
"""

from movieratings.api.models.jsonapi import (
    ResourceIdentifier,
    Relationship,
    MovieResource,
    RatingResource,
    MovieDocument,
    RatingDocument,
    ErrorDetail,
    ErrorDocument,
)
from movieratings.api.models.requests import (
    MovieRatingRequest,
    UserMovieRatingRequest,
)

__all__ = [
    "ResourceIdentifier",
    "Relationship",
    "MovieResource",
    "RatingResource",
    "MovieDocument",
    "RatingDocument",
    "ErrorDetail",
    "ErrorDocument",
    "MovieRatingRequest",
    "UserMovieRatingRequest",
]
