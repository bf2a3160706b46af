"""
Banking service settings.

Values come from the process environment, with a local .env
file filling in anything unset. The database URL is the only
setting most deployments change.
"""

import os
from functools import lru_cache

from dotenv import load_dotenv

load_dotenv()


class Settings:
    """Server, database and logging settings for the banking service."""

    APP_NAME: str = "Banking Service"
    APP_VERSION: str = "0.1.0"
    ENVIRONMENT: str = os.getenv("ENVIRONMENT", "development")
    DEBUG: bool = os.getenv("DEBUG", "false").lower() == "true"

    HOST: str = os.getenv("HOST", "0.0.0.0")
    PORT: int = int(os.getenv("PORT", "8000"))

    # Tests point this at SQLite; anything else expects PostgreSQL.
    DATABASE_URL: str = os.getenv(
        "DATABASE_URL",
        "postgresql://localhost:5432/banking_service",
    )

    # Level for the banking_service logger tree (see logging_config).
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()


@lru_cache()
def get_settings() -> Settings:
    """Settings are read once per process."""
    return Settings()
