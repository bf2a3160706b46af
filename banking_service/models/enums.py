"""
Shared enumerations for database models.

Python enums mapped to database enums ensure only valid
values can be stored.
"""

import enum


class AccountStatus(str, enum.Enum):
    """Lifecycle state of a customer account."""
    ACTIVE = "ACTIVE"
    CLOSED = "CLOSED"
