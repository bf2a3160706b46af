"""
User registration endpoint.
"""

from fastapi import APIRouter, Depends, Response
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from banking_service.exceptions import BankingError
from banking_service.models.base import get_db
from banking_service.services.user_service import UserService
from banking_service.schemas.user import UserRegister

router = APIRouter(prefix="/users/v1", tags=["Users"])


@router.post("/register", status_code=201)
def register(
    request: UserRegister,
    db: Session = Depends(get_db),
):
    """Register a new user. The response has no body."""
    service = UserService(db)
    try:
        service.register(request)
        db.commit()
    except (BankingError, SQLAlchemyError):
        db.rollback()
        raise
    return Response(status_code=201)
