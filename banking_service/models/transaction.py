"""
Transaction model.

One row per completed transfer. Rows are append-only: once
written they are never updated or deleted, even when one of
the accounts is later closed.
"""

from datetime import datetime
from decimal import Decimal

from sqlalchemy import DateTime, Numeric, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column, relationship

from banking_service.models.base import Base


class Transaction(Base):
    __tablename__ = "transactions"

    id: Mapped[int] = mapped_column(primary_key=True)
    source_account_id: Mapped[int] = mapped_column(
        ForeignKey("accounts.id"), nullable=False, index=True
    )
    destination_account_id: Mapped[int] = mapped_column(
        ForeignKey("accounts.id"), nullable=False, index=True
    )
    amount: Mapped[Decimal] = mapped_column(
        Numeric(15, 3), nullable=False
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime, nullable=False, default=datetime.utcnow
    )

    source_account: Mapped["Account"] = relationship(
        foreign_keys=[source_account_id]
    )
    destination_account: Mapped["Account"] = relationship(
        foreign_keys=[destination_account_id]
    )

    @property
    def source_account_number(self) -> str:
        return self.source_account.account_number

    @property
    def destination_account_number(self) -> str:
        return self.destination_account.account_number

    def __repr__(self) -> str:
        return (
            f"<Transaction {self.source_account_id} -> "
            f"{self.destination_account_id} {self.amount}>"
        )
