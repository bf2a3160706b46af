"""
Account store — every query against the accounts table.

Services never build account queries themselves; they go
through this class so locking and filtering rules live in
one place.
"""

from sqlalchemy import select, func
from sqlalchemy.orm import Session

from banking_service.models.account import Account
from banking_service.models.enums import AccountStatus


class AccountStore:

    def __init__(self, db: Session):
        self.db = db

    def save(self, account: Account) -> Account:
        self.db.add(account)
        self.db.flush()
        return account

    def find_all(self) -> list[Account]:
        accounts = self.db.execute(
            select(Account).order_by(Account.id)
        ).scalars().all()
        return list(accounts)

    def find_active(self) -> list[Account]:
        accounts = self.db.execute(
            select(Account)
            .where(Account.status == AccountStatus.ACTIVE)
            .order_by(Account.id)
        ).scalars().all()
        return list(accounts)

    def find_by_account_number(self, account_number: str) -> Account | None:
        return self.db.execute(
            select(Account).where(Account.account_number == account_number)
        ).scalar_one_or_none()

    def exists_by_account_number(self, account_number: str) -> bool:
        found = self.db.execute(
            select(Account.id)
            .where(Account.account_number == account_number)
            .limit(1)
        ).first()
        return found is not None

    def count_active_for_user(self, user_id: int) -> int:
        return self.db.execute(
            select(func.count(Account.id)).where(
                Account.user_id == user_id,
                Account.status == AccountStatus.ACTIVE,
            )
        ).scalar_one()

    def lock_for_update(self, account_ids: list[int]) -> dict[int, Account]:
        """
        Re-read accounts with row locks held until the transaction ends.

        Rows are locked in ascending id order so two transfers over
        the same pair of accounts in opposite directions cannot
        deadlock. populate_existing refreshes any copies already in
        the session with the locked values.
        """
        accounts = self.db.execute(
            select(Account)
            .where(Account.id.in_(set(account_ids)))
            .order_by(Account.id)
            .with_for_update()
            .execution_options(populate_existing=True)
        ).scalars().all()
        return {a.id: a for a in accounts}
