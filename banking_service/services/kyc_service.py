"""
KYC service — identity and eligibility profiles.

A user has at most one profile. Posting a profile for a user
who already has one updates it in place.
"""

import logging
from datetime import date
from decimal import Decimal

from sqlalchemy import select
from sqlalchemy.orm import Session

from banking_service.exceptions import InvalidArgumentError, NotFoundError
from banking_service.models.kyc_profile import KYCProfile
from banking_service.schemas.kyc import KYCRequest
from banking_service.services.user_service import UserService

logger = logging.getLogger(__name__)

MINIMUM_AGE = 18
MIN_SALARY = Decimal("100")
MAX_SALARY = Decimal("1000000")


def calculate_age(date_of_birth: date, today: date | None = None) -> int:
    """Whole years elapsed between date_of_birth and today."""
    today = today or date.today()
    had_birthday = (today.month, today.day) >= (
        date_of_birth.month, date_of_birth.day
    )
    return today.year - date_of_birth.year - (0 if had_birthday else 1)


class KYCService:

    def __init__(self, db: Session):
        self.db = db
        self.user_service = UserService(db)

    def find_by_user_id(self, user_id: int) -> KYCProfile | None:
        return self.db.execute(
            select(KYCProfile).where(KYCProfile.user_id == user_id)
        ).scalar_one_or_none()

    def get_profile(self, user_id: int) -> KYCProfile:
        profile = self.find_by_user_id(user_id)
        if not profile:
            raise NotFoundError(
                f"KYC profile for user with ID {user_id} was not found"
            )
        return profile

    def upsert_profile(self, request: KYCRequest) -> KYCProfile:
        """Validate and create or replace a user's KYC profile."""
        user = self.user_service.find_by_id(request.user_id)
        if not user:
            raise NotFoundError(f"User with ID {request.user_id} was not found")

        if calculate_age(request.date_of_birth) < MINIMUM_AGE:
            raise InvalidArgumentError("you must be 18 or older to register")

        if not MIN_SALARY <= request.salary <= MAX_SALARY:
            raise InvalidArgumentError(
                "salary must be between 100 and 1,000,000 KD"
            )

        profile = self.find_by_user_id(user.id)
        if profile is None:
            profile = KYCProfile(user_id=user.id)
            self.db.add(profile)

        profile.first_name = request.first_name
        profile.last_name = request.last_name
        profile.date_of_birth = request.date_of_birth
        profile.salary = request.salary

        self.db.flush()
        logger.info("Saved KYC profile for user %s", user.id)
        return profile
