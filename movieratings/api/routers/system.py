"""
System API endpoints (health).
"""

import logging

from fastapi import APIRouter, Depends
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from movieratings.api.dependencies import get_db
from movieratings.database import crud

logger = logging.getLogger(__name__)

router = APIRouter(tags=["system"])


@router.get("/health")
def health_check(db: Session = Depends(get_db)):
    """Health check: database connectivity and table sizes."""
    try:
        counts = crud.count_rows(db)
    except SQLAlchemyError as e:
        logger.error("Health check failed: %s", e)
        return {"status": "unhealthy", "database": "unavailable"}
    return {"status": "healthy", "database": "connected", **counts}
