"""Errors raised by the roster components."""


class RosterError(Exception):
    """Base error for this package."""


class StartupIOError(RosterError):
    """Raised when the backing file cannot be read or parsed at startup."""


class ValidationError(RosterError, ValueError):
    """Raised when a value cannot be coerced to the type a field needs."""


class WageFormatError(ValidationError):
    """Raised when an hourly wage is not a finite, non-negative number."""


class RowFormatError(ValidationError):
    """Raised when a decoded row cannot be turned into an employee record."""

    def __init__(self, row_number: int, reason: str):
        super().__init__(f"row {row_number}: {reason}")
        self.row_number = row_number
        self.reason = reason


class NotFoundError(RosterError, LookupError):
    """Raised when no employee has the requested id."""

    def __init__(self, employee_id: int):
        super().__init__(f"no employee with id {employee_id}")
        self.employee_id = employee_id


class IdSpaceExhaustedError(RosterError):
    """Raised when every id below the ceiling is already taken."""


class CodecError(RosterError, ValueError):
    """Raised when rows cannot be encoded to delimited text."""


class RaggedRowError(CodecError):
    """Raised when a row's length differs from the first row's."""


class PromptAbortedError(RosterError):
    """Raised when an operator exhausts the allowed attempts for a prompt."""
