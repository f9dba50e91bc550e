"""
CRUD operations for Movie, MovieRating and UserMovieRating models.

This module is the only code that reads or writes the rating tables. Every
statement goes through the ORM with bound parameters.

Lookups raise ``NotFound`` when no row matches. Inserts rely on the store's
uniqueness constraints and raise ``Conflict`` when the key already exists.
Updates verify the row exists inside the same transaction and raise
``NotFound`` otherwise. Any other database error propagates unchanged.
"""

import json
import logging
from typing import Any, Callable, Dict, Optional
from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from movieratings.core.errors import Conflict, NotFound
from movieratings.database.models import Base, Movie, MovieRating, UserMovieRating

logger = logging.getLogger(__name__)


def _insert(session: Session, record: Base, exists: Callable[[], bool], conflict: str) -> None:
    """
    Insert a record, turning a uniqueness violation into ``Conflict``.

    The store is the authority on uniqueness: the key is only looked up after
    the insert failed, to tell a duplicate key apart from other violations.
    """
    session.add(record)
    try:
        session.commit()
    except IntegrityError:
        session.rollback()
        if exists():
            logger.info(conflict)
            raise Conflict(conflict)
        raise
    session.refresh(record)


# ==================== MOVIE CRUD OPERATIONS ====================

def create_movie(session: Session, payload: Any, movie_id: Optional[int] = None) -> Movie:
    """
    Create a new movie.

    Args:
        session: Database session
        payload: Movie data, any JSON value, stored serialized
        movie_id: Explicit movie ID (auto-assigned when omitted)

    Returns:
        Created Movie object
    """
    movie = Movie(movie_id=movie_id, serialized=json.dumps(payload))
    session.add(movie)
    session.commit()
    session.refresh(movie)
    return movie


def get_movie(session: Session, movie_id: int) -> Movie:
    """
    Get a movie by ID.

    Args:
        session: Database session
        movie_id: Movie ID

    Returns:
        Movie object

    Raises:
        NotFound: If no movie has this ID
    """
    movie = session.get(Movie, movie_id)
    if movie is None:
        raise NotFound(f"No Movie for ID {movie_id}")
    return movie


def count_rows(session: Session) -> Dict[str, int]:
    """
    Count rows in every table.

    Args:
        session: Database session

    Returns:
        Mapping of table name to row count
    """
    return {
        model.__tablename__: session.scalar(select(func.count()).select_from(model))
        for model in (Movie, MovieRating, UserMovieRating)
    }


# ==================== MOVIE RATING CRUD OPERATIONS ====================

def find_movie_rating(session: Session, movie_id: int) -> Optional[MovieRating]:
    """Get a movie rating by movie ID, or None."""
    return session.get(MovieRating, movie_id)


def get_movie_rating(session: Session, movie_id: int) -> MovieRating:
    """
    Get the aggregate rating of a movie.

    Args:
        session: Database session
        movie_id: Movie ID

    Returns:
        MovieRating object

    Raises:
        NotFound: If the movie has no rating
    """
    rating = find_movie_rating(session, movie_id)
    if rating is None:
        raise NotFound(f"No MovieRating for Movie ID {movie_id}")
    return rating


def create_movie_rating(
    session: Session,
    movie_id: int,
    average_rating: int,
    total_ratings: int
) -> MovieRating:
    """
    Create the aggregate rating of a movie.

    Args:
        session: Database session
        movie_id: Movie ID
        average_rating: Average rating
        total_ratings: Number of ratings

    Returns:
        Created MovieRating object

    Raises:
        Conflict: If the movie already has a rating
    """
    rating = MovieRating(
        movie_id=movie_id,
        average_rating=average_rating,
        total_ratings=total_ratings
    )
    _insert(
        session,
        rating,
        exists=lambda: find_movie_rating(session, movie_id) is not None,
        conflict=f"MovieRating already exists for Movie ID {movie_id}",
    )
    logger.info("Created MovieRating for Movie ID %s", movie_id)
    return rating


def update_movie_rating(
    session: Session,
    movie_id: int,
    average_rating: int,
    total_ratings: int
) -> MovieRating:
    """
    Overwrite the aggregate rating of a movie.

    Args:
        session: Database session
        movie_id: Movie ID
        average_rating: New average rating
        total_ratings: New number of ratings

    Returns:
        Updated MovieRating object

    Raises:
        NotFound: If the movie has no rating
    """
    rating = get_movie_rating(session, movie_id)
    rating.average_rating = average_rating
    rating.total_ratings = total_ratings
    session.commit()
    session.refresh(rating)
    logger.info("Updated MovieRating for Movie ID %s", movie_id)
    return rating


# ==================== USER MOVIE RATING CRUD OPERATIONS ====================

def find_user_movie_rating(session: Session, user_id: int, movie_id: int) -> Optional[UserMovieRating]:
    """Get a user's rating of a movie, or None."""
    stmt = select(UserMovieRating).where(
        UserMovieRating.user_id == user_id,
        UserMovieRating.movie_id == movie_id
    )
    return session.scalars(stmt).first()


def get_user_movie_rating(session: Session, user_id: int, movie_id: int) -> UserMovieRating:
    """
    Get a user's rating of a movie.

    Raises:
        NotFound: If the user has not rated the movie
    """
    rating = find_user_movie_rating(session, user_id, movie_id)
    if rating is None:
        raise NotFound(f"No UserMovieRating for User ID {user_id} and Movie ID {movie_id}")
    return rating


def create_user_movie_rating(
    session: Session,
    user_id: int,
    movie_id: int,
    rating: int
) -> UserMovieRating:
    """
    Create a user's rating of a movie.

    Args:
        session: Database session
        user_id: User ID
        movie_id: Movie ID
        rating: Rating value

    Returns:
        Created UserMovieRating object

    Raises:
        Conflict: If the user already rated the movie
    """
    record = UserMovieRating(user_id=user_id, movie_id=movie_id, rating=rating)
    _insert(
        session,
        record,
        exists=lambda: find_user_movie_rating(session, user_id, movie_id) is not None,
        conflict=f"UserMovieRating already exists for User ID {user_id} and Movie ID {movie_id}",
    )
    logger.info("Created UserMovieRating %s for User ID %s and Movie ID %s", record.id, user_id, movie_id)
    return record


def update_user_movie_rating(
    session: Session,
    user_id: int,
    movie_id: int,
    rating: int
) -> UserMovieRating:
    """
    Overwrite a user's rating of a movie.

    Raises:
        NotFound: If the user has not rated the movie
    """
    record = get_user_movie_rating(session, user_id, movie_id)
    record.rating = rating
    session.commit()
    session.refresh(record)
    logger.info("Updated UserMovieRating for User ID %s and Movie ID %s", user_id, movie_id)
    return record


# ==================== TABLE MAINTENANCE ====================

def delete_all(session: Session) -> None:
    """Delete every row from every table, children first."""
    for model in (UserMovieRating, MovieRating, Movie):
        session.query(model).delete()
    session.commit()
