"""
Account service — account lifecycle and fund transfers.

This is where every business rule about accounts lives:
opening limits, the initial balance range, closing, and the
ordered validation that gates a transfer. The service only
flushes; the caller commits, so a transfer's two balance
updates and its ledger row become visible together or not
at all.
"""

import logging
from datetime import datetime
from decimal import Decimal

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from banking_service.exceptions import (
    InsufficientFundsError,
    InvalidArgumentError,
    InvalidStateError,
    LimitExceededError,
    NotFoundError,
)
from banking_service.models.account import Account
from banking_service.models.enums import AccountStatus
from banking_service.models.transaction import Transaction
from banking_service.schemas.account import AccountCreate, TransferRequest
from banking_service.services.account_numbers import AccountNumberGenerator
from banking_service.services.account_store import AccountStore
from banking_service.services.ledger_service import LedgerService
from banking_service.services.user_service import UserService

logger = logging.getLogger(__name__)

MIN_INITIAL_BALANCE = Decimal("10")
MAX_INITIAL_BALANCE = Decimal("1000000")
MAX_ACTIVE_ACCOUNTS_PER_USER = 5


class AccountService:

    def __init__(self, db: Session, number_generator: AccountNumberGenerator | None = None):
        self.db = db
        self.store = AccountStore(db)
        self.ledger_service = LedgerService(db)
        self.user_service = UserService(db)
        self.number_generator = number_generator or AccountNumberGenerator(self.store)

    def list_active_accounts(self) -> list[Account]:
        """All accounts that are not closed."""
        return self.store.find_active()

    def create_account(self, request: AccountCreate) -> Account:
        """
        Open a new active account for an existing user.

        Checks run in order: user exists, initial balance in
        range, user below the active account cap.
        """
        user = self.user_service.find_by_id(request.user_id)
        if not user:
            raise NotFoundError(f"User with ID {request.user_id} was not found")

        if not MIN_INITIAL_BALANCE <= request.initial_balance <= MAX_INITIAL_BALANCE:
            raise InvalidArgumentError(
                "Initial balance must be between 10 and 1,000,000 KD"
            )

        if self.store.count_active_for_user(user.id) >= MAX_ACTIVE_ACCOUNTS_PER_USER:
            raise LimitExceededError(
                f"user has reached the maximum limit of "
                f"{MAX_ACTIVE_ACCOUNTS_PER_USER} active accounts"
            )

        account = self._insert_with_unique_number(
            user_id=user.id,
            name=request.name,
            balance=request.initial_balance,
        )
        logger.info(
            "Opened account %s for user %s with balance %s",
            account.account_number, user.id, account.balance,
        )
        return account

    def _insert_with_unique_number(
        self, user_id: int, name: str, balance: Decimal
    ) -> Account:
        """
        Insert an account, retrying with a new number on collision.

        Each attempt runs in a SAVEPOINT so a unique-index violation
        only undoes that one insert, not the caller's transaction.
        """
        while True:
            number = self.number_generator.next_unused()
            account = Account(
                user_id=user_id,
                name=name,
                balance=balance,
                account_number=number,
                status=AccountStatus.ACTIVE,
            )
            try:
                with self.db.begin_nested():
                    self.db.add(account)
                    self.db.flush()
            except IntegrityError:
                if not self.store.exists_by_account_number(number):
                    raise
                logger.warning(
                    "Account number %s claimed concurrently, regenerating", number
                )
                continue
            return account

    def close_account(self, account_number: str) -> None:
        """
        Close an account.

        Closing an account that is already closed succeeds and
        leaves it untouched; it is never reactivated.
        """
        account = self.store.find_by_account_number(account_number)
        if not account:
            raise NotFoundError(f"account number {account_number} does not exist")

        if account.can_transition_to(AccountStatus.CLOSED):
            account.status = AccountStatus.CLOSED
            account.closed_at = datetime.utcnow()
            logger.info("Closed account %s", account_number)

        self.db.flush()

    def transfer_funds(self, request: TransferRequest) -> Decimal:
        """
        Move money between two accounts and return the new source balance.

        The order of checks is part of the contract: the first
        failing check decides the error the caller sees.
        """
        source = self.store.find_by_account_number(request.source_account_number)
        if not source:
            raise NotFoundError(
                f"source account number {request.source_account_number} was not found"
            )

        destination = self.store.find_by_account_number(
            request.destination_account_number
        )
        if not destination:
            raise NotFoundError(
                f"destination account number "
                f"{request.destination_account_number} was not found"
            )

        # Re-read both rows under lock; everything below sees the
        # committed balances and holds them until commit/rollback.
        locked = self.store.lock_for_update([source.id, destination.id])
        source = locked[source.id]
        destination = locked[destination.id]

        if not source.is_active:
            raise InvalidStateError("source account is closed")
        if not destination.is_active:
            raise InvalidStateError("destination account is closed")

        if source.balance < request.amount:
            raise InsufficientFundsError(
                "insufficient balance, source account has less than "
                "required transfer amount"
            )

        if request.amount <= 0:
            raise InvalidArgumentError("amount must be greater than zero")

        if request.source_account_number == request.destination_account_number:
            raise InvalidArgumentError("you can't transfer to the same account...")

        source.balance = source.balance - request.amount
        destination.balance = destination.balance + request.amount
        self.db.flush()

        self.ledger_service.record_transfer(source, destination, request.amount)

        logger.info(
            "Transferred %s from %s to %s",
            request.amount, source.account_number, destination.account_number,
        )
        return source.balance

    def get_account_transactions(self, account_number: str) -> list[Transaction]:
        """Transfer history for an account, including closed ones."""
        account = self.store.find_by_account_number(account_number)
        if not account:
            raise NotFoundError(f"account number {account_number} does not exist")
        return self.ledger_service.get_transactions_for_account(account.id)
