"""
Tests for the KYCService.
"""

from datetime import date
from decimal import Decimal

import pytest
from sqlalchemy import select

from banking_service.exceptions import InvalidArgumentError, NotFoundError
from banking_service.models.kyc_profile import KYCProfile
from banking_service.schemas.kyc import KYCRequest
from banking_service.services.kyc_service import KYCService, calculate_age


def years_ago(years, today=None):
    today = today or date.today()
    try:
        return today.replace(year=today.year - years)
    except ValueError:
        # Feb 29 in a non-leap target year
        return today.replace(year=today.year - years, day=28)


def kyc_request(user_id, **overrides):
    data = {
        "user_id": user_id,
        "first_name": "Sara",
        "last_name": "Ali",
        "date_of_birth": date(1990, 5, 17),
        "salary": Decimal("1500"),
    }
    data.update(overrides)
    return KYCRequest(**data)


class TestCalculateAge:

    def test_on_birthday(self):
        assert calculate_age(date(2000, 6, 15), today=date(2018, 6, 15)) == 18

    def test_day_before_birthday(self):
        assert calculate_age(date(2000, 6, 15), today=date(2018, 6, 14)) == 17

    def test_later_in_year(self):
        assert calculate_age(date(2000, 1, 1), today=date(2024, 12, 31)) == 24

    def test_future_date_is_negative(self):
        assert calculate_age(date(2030, 1, 1), today=date(2020, 1, 1)) < 0


class TestUpsertProfile:

    def test_create_profile(self, db_session, make_user):
        user = make_user()
        service = KYCService(db_session)

        profile = service.upsert_profile(kyc_request(user.id))
        db_session.commit()

        assert profile.id is not None
        assert profile.user_id == user.id
        assert profile.first_name == "Sara"
        assert profile.salary == Decimal("1500.000")
        assert profile.date_of_birth == date(1990, 5, 17)

    def test_second_upsert_updates_in_place(self, db_session, make_user):
        user = make_user()
        service = KYCService(db_session)

        first = service.upsert_profile(kyc_request(user.id))
        db_session.commit()
        second = service.upsert_profile(kyc_request(
            user.id, first_name="Noura", salary=Decimal("2500.5"),
        ))
        db_session.commit()

        profiles = db_session.execute(
            select(KYCProfile).where(KYCProfile.user_id == user.id)
        ).scalars().all()
        assert len(profiles) == 1
        assert first.id == second.id
        assert profiles[0].first_name == "Noura"
        assert profiles[0].salary == Decimal("2500.500")

    def test_unknown_user_rejected(self, db_session):
        service = KYCService(db_session)

        with pytest.raises(NotFoundError, match="User with ID 999 was not found"):
            service.upsert_profile(kyc_request(999))

    def test_under_eighteen_rejected(self, db_session, make_user):
        user = make_user()
        service = KYCService(db_session)

        with pytest.raises(
            InvalidArgumentError, match="you must be 18 or older to register"
        ):
            service.upsert_profile(kyc_request(user.id, date_of_birth=years_ago(17)))

    def test_exactly_eighteen_accepted(self, db_session, make_user):
        user = make_user()
        service = KYCService(db_session)

        profile = service.upsert_profile(
            kyc_request(user.id, date_of_birth=years_ago(18))
        )
        db_session.commit()
        assert profile.id is not None

    @pytest.mark.parametrize("salary", ["99.999", "1000000.001", "0"])
    def test_salary_out_of_range_rejected(self, db_session, make_user, salary):
        user = make_user()
        service = KYCService(db_session)

        with pytest.raises(
            InvalidArgumentError,
            match="salary must be between 100 and 1,000,000",
        ):
            service.upsert_profile(kyc_request(user.id, salary=Decimal(salary)))

    @pytest.mark.parametrize("salary", ["100", "1000000"])
    def test_salary_bounds_are_inclusive(self, db_session, make_user, salary):
        user = make_user()
        service = KYCService(db_session)

        profile = service.upsert_profile(kyc_request(user.id, salary=Decimal(salary)))
        db_session.commit()
        assert profile.salary == Decimal(salary)

    def test_age_checked_before_salary(self, db_session, make_user):
        user = make_user()
        service = KYCService(db_session)

        with pytest.raises(InvalidArgumentError, match="18 or older"):
            service.upsert_profile(kyc_request(
                user.id, date_of_birth=years_ago(3), salary=Decimal("1"),
            ))

    def test_rejected_update_keeps_existing_profile(self, db_session, make_user):
        user = make_user()
        service = KYCService(db_session)
        service.upsert_profile(kyc_request(user.id))
        db_session.commit()

        with pytest.raises(InvalidArgumentError):
            service.upsert_profile(kyc_request(user.id, salary=Decimal("5")))
        db_session.rollback()

        assert service.get_profile(user.id).salary == Decimal("1500.000")


class TestGetProfile:

    def test_get_existing_profile(self, db_session, make_user):
        user = make_user()
        service = KYCService(db_session)
        service.upsert_profile(kyc_request(user.id))
        db_session.commit()

        profile = service.get_profile(user.id)
        assert profile.last_name == "Ali"

    def test_missing_profile_rejected(self, db_session, make_user):
        user = make_user()
        service = KYCService(db_session)

        with pytest.raises(NotFoundError, match="KYC profile"):
            service.get_profile(user.id)
