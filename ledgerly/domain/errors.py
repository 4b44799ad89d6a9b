"""Errors raised by the ledgerly domain.

Every error is recoverable: the command layer prints the message and
returns to the menu.
"""


class LedgerError(Exception):
    """Base class for user-facing ledger errors."""

    message = "Something went wrong."

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.message)

    @property
    def user_message(self) -> str:
        return str(self)


class AlreadyExistsError(LedgerError):
    """Raised when registering an identity that is already taken."""

    message = "Email already registered."


class InvalidCredentialsError(LedgerError):
    """Raised when the identity is unknown or the credential does not match."""

    message = "Invalid credentials."


class InvalidAmountError(LedgerError, ValueError):
    """Raised when amount text is not a real number."""

    message = "Invalid amount. Please enter a valid number."


class InvalidDateError(LedgerError, ValueError):
    """Raised when date text does not match yyyy-MM-dd."""

    message = "Invalid date format. Please use yyyy-MM-dd format."


class InvalidDateTimeError(LedgerError, ValueError):
    """Raised when date-time text does not match yyyy-MM-dd HH:mm."""

    message = "Invalid date format. Please use yyyy-MM-dd HH:mm format."


class NotLoggedInError(LedgerError):
    """Raised when a ledger operation is attempted on a closed session."""

    message = "You must be logged in to do that."
