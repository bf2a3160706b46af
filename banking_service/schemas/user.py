"""
Pydantic schemas for user registration.
"""

from pydantic import Field

from banking_service.schemas.base import CamelModel


class UserRegister(CamelModel):
    # Length limits are business rules with their own messages,
    # enforced by UserService; here we only reject blanks.
    username: str = Field(min_length=1)
    password: str = Field(min_length=1)
