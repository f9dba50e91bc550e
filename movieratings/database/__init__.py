"""
Database module for the movie ratings service.

This module provides database models, connection management, and CRUD operations
using SQLAlchemy ORM.
"""

from movieratings.database.models import Base, Movie, MovieRating, UserMovieRating
from movieratings.database.connection import DatabaseManager, DEFAULT_DATABASE_URL
from movieratings.database import crud
from movieratings.database.init_db import (
    init_database,
    stage_database,
    unstage_database,
    uninstall_database,
    verify_schema,
)

__all__ = [
    # Models
    'Base',
    'Movie',
    'MovieRating',
    'UserMovieRating',
    # Connection
    'DatabaseManager',
    'DEFAULT_DATABASE_URL',
    # Initialization
    'init_database',
    'stage_database',
    'unstage_database',
    'uninstall_database',
    'verify_schema',
    # CRUD module
    'crud',
]
