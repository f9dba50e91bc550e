"""
Per-user movie rating API endpoints.
"""

from typing import Any

from fastapi import APIRouter, Body, Depends
from sqlalchemy.orm import Session

from movieratings.api.dependencies import get_db
from movieratings.api.models import ErrorDocument, RatingDocument, UserMovieRatingRequest
from movieratings.api.routers._keys import parse_key
from movieratings.core.errors import BadRequest
from movieratings.core.formatter import document, format_user_movie_rating
from movieratings.database import crud
from movieratings.utils.validators import validate_resource

router = APIRouter(
    prefix="/usermovieratings",
    tags=["usermovieratings"],
    responses={code: {"model": ErrorDocument} for code in (400, 404, 409)},
)

RATING_PATH = "/{user_id}/movies/{movie_id}"


@router.post("", response_model=RatingDocument)
def create_user_movie_rating(payload: Any = Body(None), db: Session = Depends(get_db)):
    """Record a user's rating of a movie; never overwrites an existing one."""
    result = validate_resource(payload, UserMovieRatingRequest)
    if not result.ok:
        raise BadRequest(result.error)
    rating = crud.create_user_movie_rating(db, **result.params)
    return document(format_user_movie_rating(rating))


@router.get(RATING_PATH, response_model=RatingDocument)
def get_user_movie_rating(user_id: str, movie_id: str, db: Session = Depends(get_db)):
    """Display a user's rating of a movie."""
    not_found = f"No UserMovieRating for User ID {user_id} and Movie ID {movie_id}"
    rating = crud.get_user_movie_rating(
        db,
        parse_key(user_id, not_found),
        parse_key(movie_id, not_found),
    )
    return document(format_user_movie_rating(rating))


@router.patch(RATING_PATH, response_model=RatingDocument)
def update_user_movie_rating(
    user_id: str,
    movie_id: str,
    payload: Any = Body(None),
    db: Session = Depends(get_db),
):
    """Overwrite a user's existing rating of a movie."""
    result = validate_resource(
        payload,
        UserMovieRatingRequest,
        path_params={"user_id": user_id, "movie_id": movie_id},
    )
    if not result.ok:
        raise BadRequest(result.error)
    rating = crud.update_user_movie_rating(db, **result.params)
    return document(format_user_movie_rating(rating))
