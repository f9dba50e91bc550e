"""
JSON:API response formatting.

Turns stored records into resource objects of the form::

    {"type": ..., "id": ..., "attributes": {...}, "relationships": {...}}

Ids and rating attribute values are rendered as strings even though they
are integers in the database.
"""

import json
from typing import Any, Dict


def _identifier(resource_type: str, resource_id: Any) -> Dict[str, str]:
    return {"type": resource_type, "id": str(resource_id)}


def _relationship(resource_type: str, resource_id: Any) -> Dict[str, Dict[str, str]]:
    return {"data": _identifier(resource_type, resource_id)}


def format_movie(movie) -> Dict[str, Any]:
    """Format a Movie record; its decoded payload, of any JSON type, becomes the attributes."""
    attributes = json.loads(movie.serialized) if movie.serialized else {}
    resource = _identifier("movies", movie.movie_id)
    resource["attributes"] = attributes
    return resource


def format_movie_rating(rating) -> Dict[str, Any]:
    """Format a MovieRating record, identified by its movie."""
    resource: Dict[str, Any] = _identifier("movieratings", rating.movie_id)
    resource["attributes"] = {
        "average_rating": str(rating.average_rating),
        "total_ratings": str(rating.total_ratings),
    }
    resource["relationships"] = {
        "movies": _relationship("movies", rating.movie_id),
    }
    return resource


def format_user_movie_rating(rating) -> Dict[str, Any]:
    """Format a UserMovieRating record with its user and movie relationships."""
    resource: Dict[str, Any] = _identifier("usermovieratings", rating.id)
    resource["attributes"] = {
        "rating": str(rating.rating),
    }
    resource["relationships"] = {
        "users": _relationship("users", rating.user_id),
        "movies": _relationship("movies", rating.movie_id),
    }
    return resource


def document(resource: Dict[str, Any]) -> Dict[str, Any]:
    """Wrap one resource object in a top-level document."""
    return {"data": [resource]}
