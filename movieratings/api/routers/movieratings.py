"""
Aggregate movie rating API endpoints.
"""

from typing import Any

from fastapi import APIRouter, Body, Depends
from sqlalchemy.orm import Session

from movieratings.api.dependencies import get_db
from movieratings.api.models import ErrorDocument, MovieRatingRequest, RatingDocument
from movieratings.api.routers._keys import parse_key
from movieratings.core.errors import BadRequest
from movieratings.core.formatter import document, format_movie_rating
from movieratings.database import crud
from movieratings.utils.validators import validate_resource

router = APIRouter(
    prefix="/movieratings",
    tags=["movieratings"],
    responses={code: {"model": ErrorDocument} for code in (400, 404, 409)},
)


@router.get("/{movie_id}", response_model=RatingDocument)
def get_movie_rating(movie_id: str, db: Session = Depends(get_db)):
    """Get the overall rating of a movie based on all users' ratings."""
    key = parse_key(movie_id, f"No MovieRating for Movie ID {movie_id}")
    return document(format_movie_rating(crud.get_movie_rating(db, key)))


@router.post("", response_model=RatingDocument)
def create_movie_rating(payload: Any = Body(None), db: Session = Depends(get_db)):
    """Accept the average rating of a movie; fails if one already exists."""
    result = validate_resource(payload, MovieRatingRequest)
    if not result.ok:
        raise BadRequest(result.error)
    rating = crud.create_movie_rating(db, **result.params)
    return document(format_movie_rating(rating))


@router.patch("/{movie_id}", response_model=RatingDocument)
def update_movie_rating(movie_id: str, payload: Any = Body(None), db: Session = Depends(get_db)):
    """Overwrite the average rating of a movie that already has one."""
    result = validate_resource(payload, MovieRatingRequest, path_params={"movie_id": movie_id})
    if not result.ok:
        raise BadRequest(result.error)
    rating = crud.update_movie_rating(db, **result.params)
    return document(format_movie_rating(rating))
