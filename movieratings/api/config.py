"""
API configuration loaded from environment or defaults.

``Settings`` is built once at startup and passed explicitly to the
application factory; nothing reads the environment after that.
"""

import os
from typing import List, Optional

from pydantic import BaseModel, Field

from movieratings.database.connection import DEFAULT_DATABASE_URL


def _env_bool(name: str, default: bool = False) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


class Settings(BaseModel):
    """Runtime configuration for the API and its database."""

    database_url: str = DEFAULT_DATABASE_URL
    sql_echo: bool = False
    log_level: str = "INFO"
    log_file: Optional[str] = None
    api_host: str = "0.0.0.0"
    api_port: int = Field(8000, ge=1, le=65535)
    cors_origins: List[str] = Field(default_factory=lambda: ["*"])

    @classmethod
    def from_env(cls) -> "Settings":
        """Build settings from environment variables, falling back to defaults."""
        origins = os.getenv("CORS_ORIGINS", "*")
        return cls(
            database_url=os.getenv("DATABASE_URL") or DEFAULT_DATABASE_URL,
            sql_echo=_env_bool("SQL_ECHO"),
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
            log_file=os.getenv("LOG_FILE") or None,
            api_host=os.getenv("API_HOST", "0.0.0.0"),
            api_port=int(os.getenv("API_PORT", "8000")),
            cors_origins=[origin.strip() for origin in origins.split(",") if origin.strip()],
        )
