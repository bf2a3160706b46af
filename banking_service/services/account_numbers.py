"""
Account number generation.

Numbers are "77" followed by 12 digits from the operating
system's CSPRNG. Predictable account numbers would let anyone
enumerate accounts, so the statistical PRNG in `random` is
not an option here.
"""

import logging
import secrets
from typing import Callable

from banking_service.services.account_store import AccountStore

logger = logging.getLogger(__name__)

ACCOUNT_NUMBER_PREFIX = "77"
ACCOUNT_NUMBER_RANDOM_DIGITS = 12
ACCOUNT_NUMBER_LENGTH = len(ACCOUNT_NUMBER_PREFIX) + ACCOUNT_NUMBER_RANDOM_DIGITS

# One instance for the whole process.
_secure_random = secrets.SystemRandom()


def generate_account_number() -> str:
    """Draw a fresh candidate number. Uniqueness is not checked."""
    digits = "".join(
        str(_secure_random.randrange(10))
        for _ in range(ACCOUNT_NUMBER_RANDOM_DIGITS)
    )
    return f"{ACCOUNT_NUMBER_PREFIX}{digits}"


class AccountNumberGenerator:
    """
    Produces numbers not yet present in the account store.

    The check is advisory: a concurrent request can claim the
    same number between the check and the insert. AccountService
    handles that case by catching the unique-index violation and
    asking for another number.
    """

    def __init__(
        self,
        store: AccountStore,
        generate: Callable[[], str] = generate_account_number,
    ):
        self.store = store
        self._generate = generate

    def next_unused(self) -> str:
        while True:
            number = self._generate()
            if not self.store.exists_by_account_number(number):
                return number
            logger.warning("Account number %s already in use, regenerating", number)
