"""Business logic services."""

from banking_service.services.account_store import AccountStore
from banking_service.services.ledger_service import LedgerService
from banking_service.services.user_service import UserService
from banking_service.services.kyc_service import KYCService
from banking_service.services.account_service import AccountService

__all__ = [
    "AccountStore",
    "LedgerService",
    "UserService",
    "KYCService",
    "AccountService",
]
