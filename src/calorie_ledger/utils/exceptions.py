"""Custom exceptions for the calorie ledger."""


class CalorieLedgerError(Exception):
    """Base exception for all calorie ledger errors."""

    pass


class ConfigurationError(CalorieLedgerError):
    """Raised when there is a configuration error."""

    pass


class InvalidDayError(CalorieLedgerError, ValueError):
    """Raised when a day index or label does not name one of the seven days."""

    pass


class InvalidAmountError(CalorieLedgerError, ValueError):
    """Raised when a calorie amount is not an integer."""

    pass


class StorageError(CalorieLedgerError, OSError):
    """Raised when the calorie data file cannot be read or written."""

    pass
