"""
FastAPI dependency injection for database sessions.
"""

from typing import Generator

from fastapi import Request
from sqlalchemy.orm import Session

from movieratings.database.connection import DatabaseManager


def get_db_manager(request: Request) -> DatabaseManager:
    """Database manager owned by the running application."""
    return request.app.state.db_manager


def get_db(request: Request) -> Generator[Session, None, None]:
    """Yield database session for FastAPI Depends()."""
    with get_db_manager(request).session_scope() as session:
        yield session
