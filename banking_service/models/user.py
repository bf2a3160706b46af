"""
User model.

The identity anchor. Accounts and the KYC profile point back
to a user by id.
"""

from datetime import datetime
from typing import Optional

from sqlalchemy import String, DateTime
from sqlalchemy.orm import Mapped, mapped_column, relationship

from banking_service.models.base import Base


class User(Base):
    __tablename__ = "users"

    id: Mapped[int] = mapped_column(primary_key=True)
    username: Mapped[str] = mapped_column(
        String(50), unique=True, nullable=False, index=True
    )
    password_hash: Mapped[str] = mapped_column(String(255), nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime, nullable=False, default=datetime.utcnow
    )

    accounts: Mapped[list["Account"]] = relationship(back_populates="user")
    kyc_profile: Mapped[Optional["KYCProfile"]] = relationship(
        back_populates="user", uselist=False
    )

    def __repr__(self) -> str:
        return f"<User {self.username}>"
