"""
User service — registration and user lookup.

Other services only need find_by_id() to validate that a
user id refers to a real user.
"""

import logging

from passlib.hash import pbkdf2_sha256
from sqlalchemy import select
from sqlalchemy.orm import Session

from banking_service.exceptions import ConflictError, InvalidArgumentError
from banking_service.models.user import User
from banking_service.schemas.user import UserRegister

logger = logging.getLogger(__name__)

MIN_USERNAME_LENGTH = 5
MAX_USERNAME_LENGTH = 11


def hash_password(password: str) -> str:
    return pbkdf2_sha256.hash(password)


def verify_password(password: str, password_hash: str) -> bool:
    return pbkdf2_sha256.verify(password, password_hash)


class UserService:

    def __init__(self, db: Session):
        self.db = db

    def find_by_id(self, user_id: int) -> User | None:
        return self.db.get(User, user_id)

    def find_by_username(self, username: str) -> User | None:
        return self.db.execute(
            select(User).where(User.username == username)
        ).scalar_one_or_none()

    def register(self, request: UserRegister) -> User:
        """
        Create a new user with a hashed password.

        Checks run in order: duplicate username, too long,
        too short.
        """
        if self.find_by_username(request.username):
            raise ConflictError(
                f"Username '{request.username}' is already taken."
            )
        if len(request.username) > MAX_USERNAME_LENGTH:
            raise InvalidArgumentError(
                f"Username '{request.username}' is too long."
            )
        if len(request.username) < MIN_USERNAME_LENGTH:
            raise InvalidArgumentError(
                f"Username '{request.username}' is too short."
            )

        user = User(
            username=request.username,
            password_hash=hash_password(request.password),
        )
        self.db.add(user)
        self.db.flush()
        logger.info("Registered user %s (id=%s)", user.username, user.id)
        return user
