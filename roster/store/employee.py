# ==============================================
# Employee (Data Classes)
# ==============================================
#
# PURPOSE:
#   The record type held by the RecordStore, plus the
#   fallible parsers that turn raw field text into typed
#   values.
#
# CLASSES:
# --------
# - Employee (dataclass, mutable)
#     id, first_name, last_name, email, hourly_wage
#     - from_row(row) (classmethod) → Deserialize a decoded row
#     - to_row() → Serialize for the codec
#
# - EmployeeFields (dataclass, frozen)
#     The four fields an edit may replace. The id is never
#     part of an edit.
#
# ROW LAYOUT:
# -----------
#   id,firstName,lastName,email,hourlyWage
#
# ==============================================

import re
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from typing import List, Sequence

from ..errors import ValidationError, WageFormatError

COLUMN_COUNT = 5

_DIGITS = re.compile(r"[0-9]+")


def parse_employee_id(text: str) -> int:
    """
    Parse an employee id.

    Raises:
        ValidationError: if the text is not a positive integer
    """
    value = str(text).strip()
    if not _DIGITS.fullmatch(value):
        raise ValidationError(f"employee id must be a positive integer, got {text!r}")
    employee_id = int(value)
    if employee_id < 1:
        raise ValidationError(f"employee id must be a positive integer, got {text!r}")
    return employee_id


def parse_wage(text: str) -> Decimal:
    """
    Parse an hourly wage.

    The Decimal keeps the precision it was written with, so "20.00"
    renders back as "20.00".

    Raises:
        WageFormatError: if the text is not a finite, non-negative number
    """
    value = str(text).strip()
    try:
        wage = Decimal(value)
    except InvalidOperation:
        raise WageFormatError(f"hourly wage must be a number, got {text!r}") from None
    if not wage.is_finite():
        raise WageFormatError(f"hourly wage must be a finite number, got {text!r}")
    if wage < 0:
        raise WageFormatError(f"hourly wage must not be negative, got {text!r}")
    return wage


def format_wage(wage: Decimal) -> str:
    """Render a wage for display: two decimal places."""
    return f"{wage:.2f}"


@dataclass(frozen=True)
class EmployeeFields:
    """The replaceable fields of an employee."""
    first_name: str
    last_name: str
    email: str
    hourly_wage: Decimal


@dataclass
class Employee:
    """
    A single employee record.

    Owned by the RecordStore; edits mutate it in place.
    """
    id: int
    first_name: str
    last_name: str
    email: str
    hourly_wage: Decimal

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"

    @property
    def fields(self) -> EmployeeFields:
        return EmployeeFields(
            first_name=self.first_name,
            last_name=self.last_name,
            email=self.email,
            hourly_wage=self.hourly_wage,
        )

    def apply(self, fields: EmployeeFields) -> None:
        """Replace all four mutable fields. The id is left alone."""
        self.first_name = fields.first_name
        self.last_name = fields.last_name
        self.email = fields.email
        self.hourly_wage = fields.hourly_wage

    def to_row(self) -> List[str]:
        """Convert to a row of field strings for the codec."""
        return [
            str(self.id),
            self.first_name,
            self.last_name,
            self.email,
            str(self.hourly_wage),
        ]

    @classmethod
    def from_row(cls, row: Sequence[str]) -> "Employee":
        """
        Create from a decoded row.

        Raises:
            ValidationError: if the row has the wrong column count,
                or the id or wage cannot be parsed
        """
        if len(row) != COLUMN_COUNT:
            raise ValidationError(
                f"expected {COLUMN_COUNT} fields, got {len(row)}"
            )
        return cls(
            id=parse_employee_id(row[0]),
            first_name=row[1],
            last_name=row[2],
            email=row[3],
            hourly_wage=parse_wage(row[4]),
        )
