"""
Create the default test user if it does not exist.

Run with:
    python -m banking_service.scripts.init_user
"""

import logging

from banking_service.config import get_settings
from banking_service.logging_config import setup_logging
from banking_service.models.base import SessionLocal, init_db
from banking_service.schemas.user import UserRegister
from banking_service.services.user_service import UserService

logger = logging.getLogger(__name__)

DEFAULT_USERNAME = "testuser"
DEFAULT_PASSWORD = "password123"


def init_default_user(db, username: str = DEFAULT_USERNAME,
                      password: str = DEFAULT_PASSWORD) -> bool:
    """Register the default user. Returns False if it already existed."""
    service = UserService(db)
    if service.find_by_username(username):
        logger.info("User %s already exists", username)
        return False

    logger.info("Creating user %s", username)
    service.register(UserRegister(username=username, password=password))
    return True


def main() -> None:
    setup_logging(get_settings().LOG_LEVEL)
    init_db()
    db = SessionLocal()
    try:
        init_default_user(db)
        db.commit()
    finally:
        db.close()


if __name__ == "__main__":
    main()
