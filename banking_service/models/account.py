"""
Customer account model.

Each account holds its balance directly as a fixed-point
decimal. Accounts are never deleted: closing one moves it to
CLOSED, which hides it from listings and blocks transfers but
keeps it for transaction history.
"""

from datetime import datetime
from decimal import Decimal

from sqlalchemy import (
    String, DateTime, Numeric, ForeignKey,
    Enum as SAEnum,
)
from sqlalchemy.orm import Mapped, mapped_column, relationship

from banking_service.models.base import Base
from banking_service.models.enums import AccountStatus


# Valid state transitions. CLOSED is terminal.
VALID_TRANSITIONS: dict[AccountStatus, set[AccountStatus]] = {
    AccountStatus.ACTIVE: {AccountStatus.CLOSED},
    AccountStatus.CLOSED: set(),
}


class Account(Base):
    __tablename__ = "accounts"

    id: Mapped[int] = mapped_column(primary_key=True)
    user_id: Mapped[int] = mapped_column(
        ForeignKey("users.id"), nullable=False, index=True
    )
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    balance: Mapped[Decimal] = mapped_column(
        Numeric(15, 3), nullable=False
    )
    # The unique index is what actually guarantees uniqueness;
    # the generator's existence check only makes collisions rare.
    account_number: Mapped[str] = mapped_column(
        String(14), unique=True, nullable=False, index=True
    )
    status: Mapped[AccountStatus] = mapped_column(
        SAEnum(
            AccountStatus,
            name="account_status_enum",
            create_constraint=True,
        ),
        nullable=False,
        default=AccountStatus.ACTIVE,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime, nullable=False, default=datetime.utcnow
    )
    closed_at: Mapped[datetime | None] = mapped_column(
        DateTime, nullable=True, default=None
    )

    user: Mapped["User"] = relationship(back_populates="accounts")

    @property
    def is_active(self) -> bool:
        return self.status == AccountStatus.ACTIVE

    def can_transition_to(self, new_status: AccountStatus) -> bool:
        """Check if a state transition is valid."""
        return new_status in VALID_TRANSITIONS.get(self.status, set())

    def __repr__(self) -> str:
        return f"<Account {self.account_number} ({self.status.value})>"
