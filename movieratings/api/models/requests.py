"""
Pydantic schemas for JSON:API request documents.
"""

from typing import Any, ClassVar, Dict, Literal

from movieratings.utils.validators import (
    JsonApiModel,
    RelatedResource,
    RequiredInteger,
    ResourceRequest,
)


class RelatedMovie(RelatedResource):
    """Identifier of the rated movie."""

    path_param: ClassVar[str] = "movie_id"

    type: Literal["movies"]
    id: RequiredInteger


class RelatedUser(RelatedResource):
    """Identifier of the rating user."""

    path_param: ClassVar[str] = "user_id"

    type: Literal["users"]
    id: RequiredInteger


class MovieRelationship(JsonApiModel):
    data: RelatedMovie


class UserRelationship(JsonApiModel):
    data: RelatedUser


class MovieRatingAttributes(JsonApiModel):
    average_rating: RequiredInteger
    total_ratings: RequiredInteger


class MovieRatingRelationships(JsonApiModel):
    movies: MovieRelationship


class MovieRatingData(JsonApiModel):
    type: Literal["movieratings"]
    attributes: MovieRatingAttributes
    relationships: MovieRatingRelationships


class MovieRatingRequest(ResourceRequest):
    """Request body for creating or updating a movie's aggregate rating."""

    data: MovieRatingData

    def to_params(self) -> Dict[str, Any]:
        return {
            "movie_id": self.data.relationships.movies.data.id,
            "average_rating": self.data.attributes.average_rating,
            "total_ratings": self.data.attributes.total_ratings,
        }


class UserMovieRatingAttributes(JsonApiModel):
    rating: RequiredInteger


class UserMovieRatingRelationships(JsonApiModel):
    users: UserRelationship
    movies: MovieRelationship


class UserMovieRatingData(JsonApiModel):
    type: Literal["usermovieratings"]
    attributes: UserMovieRatingAttributes
    relationships: UserMovieRatingRelationships


class UserMovieRatingRequest(ResourceRequest):
    """Request body for creating or updating a user's rating of a movie."""

    data: UserMovieRatingData

    def to_params(self) -> Dict[str, Any]:
        return {
            "user_id": self.data.relationships.users.data.id,
            "movie_id": self.data.relationships.movies.data.id,
            "rating": self.data.attributes.rating,
        }
