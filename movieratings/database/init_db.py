"""
Database initialization, seeding and teardown.

These functions back the ``scripts/manage_db.py`` command-line tool and the
test fixtures.
"""

import logging

from sqlalchemy import inspect

from movieratings.database import crud
from movieratings.database.connection import DatabaseManager
from movieratings.database.models import Base, Movie, MovieRating, UserMovieRating

logger = logging.getLogger(__name__)

SEED_MOVIES = [
    {"name": "Jaws"},
    {"name": "The Ten Commandments"},
    {"name": "Titanic"},
]

# (movie_id, average_rating, total_ratings)
SEED_MOVIE_RATINGS = [
    (1, 4, 3),
]

# (user_id, movie_id, rating)
SEED_USER_MOVIE_RATINGS = [
    (1, 1, 10),
    (2, 1, 1),
    (3, 1, 1),
]


def init_database(db_manager: DatabaseManager, reset: bool = False) -> DatabaseManager:
    """
    Create all tables.

    Args:
        db_manager: DatabaseManager instance
        reset: If True, drop existing tables before creating new ones

    Returns:
        The same DatabaseManager instance
    """
    if reset:
        logger.info("Resetting database (dropping all tables)...")
        db_manager.reset_database()
    else:
        db_manager.create_tables()
    logger.info("Database tables created.")
    return db_manager


def stage_database(db_manager: DatabaseManager) -> None:
    """Insert the sample movies and ratings."""
    with db_manager.session_scope() as session:
        for payload in SEED_MOVIES:
            crud.create_movie(session, payload)
        session.add_all(
            MovieRating(movie_id=movie_id, average_rating=average, total_ratings=total)
            for movie_id, average, total in SEED_MOVIE_RATINGS
        )
        session.add_all(
            UserMovieRating(user_id=user_id, movie_id=movie_id, rating=rating)
            for user_id, movie_id, rating in SEED_USER_MOVIE_RATINGS
        )
    logger.info(
        "Staged %d movies, %d movie ratings, %d user movie ratings",
        len(SEED_MOVIES), len(SEED_MOVIE_RATINGS), len(SEED_USER_MOVIE_RATINGS)
    )


def unstage_database(db_manager: DatabaseManager) -> None:
    """
    Delete every row from every table.

    Tables are dropped and recreated so auto-increment counters restart.
    """
    if db_manager.is_sqlite:
        db_manager.reset_database()
    else:
        with db_manager.session_scope() as session:
            crud.delete_all(session)
    logger.info("Database emptied.")


def uninstall_database(db_manager: DatabaseManager) -> None:
    """Drop all tables."""
    db_manager.drop_tables()
    logger.info("Database tables dropped.")


def verify_schema(db_manager: DatabaseManager) -> bool:
    """
    Verify that all tables exist in the database.

    Args:
        db_manager: DatabaseManager instance

    Returns:
        True if all tables exist, False otherwise
    """
    inspector = inspect(db_manager.engine)
    existing_tables = set(inspector.get_table_names())
    missing_tables = set(Base.metadata.tables) - existing_tables

    if missing_tables:
        logger.warning("Missing tables: %s", sorted(missing_tables))
        return False
    return True
