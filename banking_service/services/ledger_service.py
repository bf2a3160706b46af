"""
Ledger service — the append-only record of transfers.

Rules:
1. A ledger row is written only after both balances are flushed
2. Rows are never updated or deleted

No other service writes to the transactions table.
"""

from decimal import Decimal

from sqlalchemy import select, or_
from sqlalchemy.orm import Session

from banking_service.models.account import Account
from banking_service.models.transaction import Transaction


class LedgerService:
    """
    The service takes a database session as a constructor
    argument. The caller controls the transaction boundary.
    """

    def __init__(self, db: Session):
        self.db = db

    def record_transfer(
        self, source: Account, destination: Account, amount: Decimal
    ) -> Transaction:
        """Append one ledger row for a completed transfer."""
        txn = Transaction(
            source_account_id=source.id,
            destination_account_id=destination.id,
            amount=amount,
        )
        self.db.add(txn)
        self.db.flush()
        return txn

    def get_transactions_for_account(self, account_id: int) -> list[Transaction]:
        """Return every transfer in or out of an account, newest first."""
        transactions = self.db.execute(
            select(Transaction)
            .where(or_(
                Transaction.source_account_id == account_id,
                Transaction.destination_account_id == account_id,
            ))
            .order_by(Transaction.created_at.desc(), Transaction.id.desc())
        ).scalars().all()
        return list(transactions)
