"""
Movie API endpoints.
"""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from movieratings.api.dependencies import get_db
from movieratings.api.models import ErrorDocument, MovieDocument
from movieratings.api.routers._keys import parse_key
from movieratings.core.formatter import document, format_movie
from movieratings.database import crud

router = APIRouter(
    prefix="/movies",
    tags=["movies"],
    responses={404: {"model": ErrorDocument}},
)


@router.get("/{movie_id}", response_model=MovieDocument)
def get_movie(movie_id: str, db: Session = Depends(get_db)):
    """Get movie data by ID."""
    key = parse_key(movie_id, f"No Movie for ID {movie_id}")
    return document(format_movie(crud.get_movie(db, key)))
