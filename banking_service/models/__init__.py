"""
Database models package.

All models must be imported here so that every table is
registered on Base.metadata before create_all() runs.
"""

from banking_service.models.base import Base
from banking_service.models.enums import AccountStatus
from banking_service.models.user import User
from banking_service.models.kyc_profile import KYCProfile
from banking_service.models.account import Account
from banking_service.models.transaction import Transaction

__all__ = [
    "Base",
    "AccountStatus",
    "User",
    "KYCProfile",
    "Account",
    "Transaction",
]
