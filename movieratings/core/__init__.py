"""
Core domain logic: error taxonomy and JSON:API response formatting.
"""

from movieratings.core.errors import (
    JsonApiError,
    BadRequest,
    NotFound,
    MethodNotAllowed,
    Conflict,
    InternalError,
)
from movieratings.core.formatter import (
    format_movie,
    format_movie_rating,
    format_user_movie_rating,
    document,
)

__all__ = [
    'JsonApiError',
    'BadRequest',
    'NotFound',
    'MethodNotAllowed',
    'Conflict',
    'InternalError',
    'format_movie',
    'format_movie_rating',
    'format_user_movie_rating',
    'document',
]
