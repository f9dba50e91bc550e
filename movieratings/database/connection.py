"""
Database connection management using SQLAlchemy.

This module handles engine creation, session management, and provides
utilities for database operations. A ``DatabaseManager`` is built once at
startup from ``Settings`` and handed to whatever needs it; there is no
process-wide instance.
"""

import logging
import os
from contextlib import contextmanager
from typing import Generator
from sqlalchemy import create_engine, event
from sqlalchemy.engine import make_url
from sqlalchemy.orm import sessionmaker, Session
from sqlalchemy.pool import StaticPool

from movieratings.database.models import Base

logger = logging.getLogger(__name__)

# Default database location
DEFAULT_DATABASE_URL = "sqlite:///data/movieratings.db"


def get_database_url(database_url: str = DEFAULT_DATABASE_URL) -> str:
    """
    Normalize a database URL.

    File-based SQLite URLs are made absolute and their directory is created.
    In-memory SQLite and other backends are returned unchanged.

    Args:
        database_url: SQLAlchemy database URL

    Returns:
        SQLAlchemy database URL
    """
    url = make_url(database_url)
    if url.get_backend_name() != "sqlite" or url.database in (None, "", ":memory:"):
        return database_url

    db_dir = os.path.dirname(url.database)
    if db_dir:
        os.makedirs(db_dir, exist_ok=True)

    # SQLite URL format: sqlite:///path/to/database.db
    return f"sqlite:///{os.path.abspath(url.database)}"


def _set_sqlite_pragma(dbapi_conn, connection_record):
    """
    Enable foreign key constraints for SQLite.

    SQLite disables foreign key constraints by default.
    """
    cursor = dbapi_conn.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


class DatabaseManager:
    """
    Database connection manager.

    Handles engine creation, session management, and schema creation.
    """

    def __init__(self, database_url: str = DEFAULT_DATABASE_URL, echo: bool = False):
        """
        Initialize database manager.

        Args:
            database_url: SQLAlchemy database URL
            echo: If True, log all SQL statements (useful for debugging)
        """
        self.database_url = get_database_url(database_url)
        self.is_sqlite = make_url(self.database_url).get_backend_name() == "sqlite"

        if self.is_sqlite:
            # One shared connection so in-memory databases survive across sessions
            self.engine = create_engine(
                self.database_url,
                echo=echo,
                connect_args={"check_same_thread": False},
                poolclass=StaticPool
            )
            event.listen(self.engine, "connect", _set_sqlite_pragma)
        else:
            self.engine = create_engine(self.database_url, echo=echo, pool_pre_ping=True)

        self.SessionLocal = sessionmaker(
            autocommit=False,
            autoflush=False,
            expire_on_commit=False,
            bind=self.engine
        )
        logger.debug("Database engine created for %s", self.engine.url.render_as_string(hide_password=True))

    def create_tables(self):
        """
        Create all tables defined in the models.

        This creates tables if they don't exist. Existing tables are not modified.
        """
        Base.metadata.create_all(bind=self.engine)

    def drop_tables(self):
        """
        Drop all tables defined in the models.

        WARNING: This will delete all data in the database!
        """
        Base.metadata.drop_all(bind=self.engine)

    def reset_database(self):
        """
        Drop and recreate all tables.

        WARNING: This will delete all data in the database!
        """
        self.drop_tables()
        self.create_tables()

    def get_session(self) -> Session:
        """
        Get a new database session.

        Returns:
            SQLAlchemy Session object; the caller must close it
        """
        return self.SessionLocal()

    @contextmanager
    def session_scope(self) -> Generator[Session, None, None]:
        """
        Context manager for database sessions.

        Automatically commits on success and rolls back on failure.

        Usage:
            with db_manager.session_scope() as session:
                session.add(rating)

        Yields:
            SQLAlchemy Session object
        """
        session = self.SessionLocal()
        try:
            yield session
            session.commit()
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()

    def close(self):
        """Close the database engine and all connections."""
        self.engine.dispose()
