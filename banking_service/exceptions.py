"""
Business error taxonomy.

Services raise these instead of generic exceptions so the API
layer can map each failure to a status code without inspecting
messages. The message itself is what the client sees.
"""


class BankingError(Exception):
    """Base class for all business rule violations."""

    status_code: int = 400

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class NotFoundError(BankingError):
    """A referenced user, account or KYC profile does not exist."""

    status_code = 404


class InvalidArgumentError(BankingError):
    """A value is out of range or the request is malformed."""


class InvalidStateError(BankingError):
    """An account is in a state that does not allow the operation."""


class InsufficientFundsError(BankingError):
    """The source account cannot cover the transfer amount."""


class LimitExceededError(BankingError):
    """A per-user limit such as the active account cap was reached."""


class ConflictError(BankingError):
    """A unique value such as a username is already taken."""
