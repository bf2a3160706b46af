"""
KYC API endpoints.
"""

from fastapi import APIRouter, Depends
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from banking_service.exceptions import BankingError
from banking_service.models.base import get_db
from banking_service.services.kyc_service import KYCService
from banking_service.schemas.kyc import KYCRequest, KYCResponse

router = APIRouter(prefix="/users/v1/kyc", tags=["KYC"])


@router.get("/{user_id}", response_model=KYCResponse)
def get_kyc(
    user_id: int,
    db: Session = Depends(get_db),
):
    """Get a user's KYC profile."""
    service = KYCService(db)
    return service.get_profile(user_id)


@router.post("", response_model=KYCResponse)
def upsert_kyc(
    request: KYCRequest,
    db: Session = Depends(get_db),
):
    """
    Create or update a user's KYC profile.

    A user has at most one profile; posting again replaces
    its fields.
    """
    service = KYCService(db)
    try:
        profile = service.upsert_profile(request)
        db.commit()
        return profile
    except (BankingError, SQLAlchemyError):
        db.rollback()
        raise
