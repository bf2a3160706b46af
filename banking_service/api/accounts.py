"""
Account and transfer API endpoints.

The API layer is thin: it owns the transaction boundary
(commit on success, rollback on failure) and delegates all
business rules to AccountService. Business errors propagate
to the application's exception handlers, which render them
as {"error": message}.
"""

from fastapi import APIRouter, Depends, Response
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from banking_service.exceptions import BankingError
from banking_service.models.base import get_db
from banking_service.services.account_service import AccountService
from banking_service.schemas.account import (
    AccountCreate,
    AccountResponse,
    AccountListResponse,
    TransferRequest,
    TransferResponse,
    TransactionResponse,
)

router = APIRouter(prefix="/accounts/v1/accounts", tags=["Accounts"])


@router.get("", response_model=AccountListResponse)
def list_accounts(db: Session = Depends(get_db)):
    """List every active account."""
    service = AccountService(db)
    return AccountListResponse(
        accounts=[
            AccountResponse.model_validate(a)
            for a in service.list_active_accounts()
        ]
    )


@router.post("", response_model=AccountResponse)
def create_account(
    request: AccountCreate,
    db: Session = Depends(get_db),
):
    """
    Open a new account for an existing user.

    The account number is generated server-side.
    """
    service = AccountService(db)
    try:
        account = service.create_account(request)
        db.commit()
        return account
    except (BankingError, SQLAlchemyError):
        db.rollback()
        raise


@router.post("/transfer", response_model=TransferResponse)
def transfer_funds(
    request: TransferRequest,
    db: Session = Depends(get_db),
):
    """
    Transfer money between two accounts.

    Both balance updates and the ledger record are committed
    together.
    """
    service = AccountService(db)
    try:
        new_balance = service.transfer_funds(request)
        db.commit()
        return TransferResponse(new_balance=new_balance)
    except (BankingError, SQLAlchemyError):
        db.rollback()
        raise


@router.post("/{account_number}/close", status_code=204)
def close_account(
    account_number: str,
    db: Session = Depends(get_db),
):
    """Close an account. Closing an already closed account is a no-op."""
    service = AccountService(db)
    try:
        service.close_account(account_number)
        db.commit()
    except (BankingError, SQLAlchemyError):
        db.rollback()
        raise
    return Response(status_code=204)


@router.get(
    "/{account_number}/transactions",
    response_model=list[TransactionResponse],
)
def get_account_transactions(
    account_number: str,
    db: Session = Depends(get_db),
):
    """Get all transfers in or out of an account, newest first."""
    service = AccountService(db)
    return service.get_account_transactions(account_number)
