"""
Pydantic schemas for KYC profiles.
"""

from datetime import date
from decimal import Decimal

from pydantic import Field, field_validator

from banking_service.money import to_money
from banking_service.schemas.base import CamelModel


class KYCRequest(CamelModel):
    user_id: int
    first_name: str = Field(min_length=1, max_length=100)
    last_name: str = Field(min_length=1, max_length=100)
    date_of_birth: date
    salary: Decimal

    @field_validator("salary")
    @classmethod
    def quantize_salary(cls, v: Decimal) -> Decimal:
        return to_money(v)


class KYCResponse(CamelModel):
    user_id: int
    first_name: str
    last_name: str
    date_of_birth: date
    salary: Decimal
