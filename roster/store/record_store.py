# ==============================================
# RecordStore
# ==============================================
#
# PURPOSE:
#   Hold the authoritative in-memory list of employees for
#   the lifetime of the process and keep it consistent while
#   the operator adds, edits and removes records.
#
# INVARIANTS:
#   - Ids are unique: new ids only come from allocate_id()
#   - Order is insertion/file order; remove() is stable
#   - update() never changes an id
#   - A failed update()/remove() leaves the store untouched
#
# ==============================================

import logging
from typing import Iterable, Iterator, List, Optional, Sequence

from ..errors import IdSpaceExhaustedError, NotFoundError, RowFormatError, ValidationError
from .employee import Employee, EmployeeFields

logger = logging.getLogger(__name__)

# Ids are allocated from [1, MAX_ID).
MAX_ID = 100000


class RecordStore:
    """
    In-memory collection of employee records.

    Lookups are linear scans comparing numeric ids; if a hand-edited
    file holds duplicate ids, the first match wins.
    """

    def __init__(self, records: Optional[Iterable[Employee]] = None):
        self._records: List[Employee] = list(records or [])

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[Employee]:
        return iter(list(self._records))

    def load(self, rows: Sequence[Sequence[str]]) -> None:
        """
        Replace the collection with records built from decoded rows.

        Args:
            rows: Rows as produced by codec.decode()

        Raises:
            RowFormatError: if any row cannot be turned into a record.
                The store is left unchanged in that case.
        """
        records = []
        for row_number, row in enumerate(rows, start=1):
            if not row:
                continue
            try:
                records.append(Employee.from_row(row))
            except ValidationError as e:
                raise RowFormatError(row_number, str(e)) from e

        self._records = records
        logger.debug("Loaded %d employee records", len(records))

    def find_by_id(self, employee_id: int) -> Optional[Employee]:
        """Return the first record with this id, or None."""
        for employee in self._records:
            if employee.id == int(employee_id):
                return employee
        return None

    def require(self, employee_id: int) -> Employee:
        """
        Like find_by_id(), but raise instead of returning None.

        Raises:
            NotFoundError: if no record has this id
        """
        employee = self.find_by_id(employee_id)
        if employee is None:
            raise NotFoundError(employee_id)
        return employee

    def allocate_id(self) -> int:
        """
        Return the smallest id in [1, MAX_ID) not used by any record.

        Raises:
            IdSpaceExhaustedError: if every id in the range is taken
        """
        used = {employee.id for employee in self._records}
        for candidate in range(1, MAX_ID):
            if candidate not in used:
                return candidate
        raise IdSpaceExhaustedError(f"all employee ids below {MAX_ID} are in use")

    def insert(self, employee: Employee) -> None:
        """Append a record. Uniqueness is trusted to allocate_id()."""
        self._records.append(employee)

    def add(self, fields: EmployeeFields, employee_id: Optional[int] = None) -> Employee:
        """
        Build a record and append it.

        Args:
            fields: The new employee's details
            employee_id: An id already taken from allocate_id(); a fresh
                one is allocated when omitted
        """
        if employee_id is None:
            employee_id = self.allocate_id()
        employee = Employee(
            id=employee_id,
            first_name=fields.first_name,
            last_name=fields.last_name,
            email=fields.email,
            hourly_wage=fields.hourly_wage,
        )
        self.insert(employee)
        logger.info("Added employee %d", employee.id)
        return employee

    def update(self, employee_id: int, fields: EmployeeFields) -> Employee:
        """
        Replace all four mutable fields of a record in place.

        Raises:
            NotFoundError: if no record has this id
        """
        employee = self.require(employee_id)
        employee.apply(fields)
        logger.info("Updated employee %d", employee.id)
        return employee

    def remove(self, employee_id: int) -> Employee:
        """
        Delete a record, keeping the order of the others.

        Raises:
            NotFoundError: if no record has this id
        """
        employee = self.require(employee_id)
        index = next(i for i, e in enumerate(self._records) if e is employee)
        del self._records[index]
        logger.info("Removed employee %d", employee.id)
        return employee

    def all_records(self) -> List[Employee]:
        """Return the records in insertion/file order."""
        return list(self._records)

    def to_rows(self) -> List[List[str]]:
        """Render every record as a row for the codec."""
        return [employee.to_row() for employee in self._records]
