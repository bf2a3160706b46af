"""
Pydantic schemas for account and transfer operations.

Range checks on amounts are deliberately not expressed here:
the service validates them in a fixed order and each failure
has its own message.
"""

from datetime import datetime
from decimal import Decimal

from pydantic import Field, field_validator

from banking_service.money import to_money
from banking_service.schemas.base import CamelModel


# --- Account Schemas ---

class AccountCreate(CamelModel):
    """Request to open a new account."""
    user_id: int
    initial_balance: Decimal
    name: str = Field(min_length=1, max_length=100)

    @field_validator("initial_balance")
    @classmethod
    def quantize_balance(cls, v: Decimal) -> Decimal:
        return to_money(v)


class AccountResponse(CamelModel):
    user_id: int
    balance: Decimal
    account_number: str
    name: str


class AccountListResponse(CamelModel):
    accounts: list[AccountResponse]


# --- Transfer Schemas ---

class TransferRequest(CamelModel):
    source_account_number: str = Field(min_length=1, max_length=14)
    destination_account_number: str = Field(min_length=1, max_length=14)
    amount: Decimal

    @field_validator("amount")
    @classmethod
    def quantize_amount(cls, v: Decimal) -> Decimal:
        return to_money(v)


class TransferResponse(CamelModel):
    new_balance: Decimal


class TransactionResponse(CamelModel):
    """One ledger record in an account's history."""
    id: int
    source_account_number: str
    destination_account_number: str
    amount: Decimal
    created_at: datetime
