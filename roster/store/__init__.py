# ==============================================
# COMPONENT 2: RECORD STORE
# ==============================================
#
# This package owns the employee records while the process
# runs: lookup by id, insert, update, delete and new-id
# allocation.
#
# Modules:
# --------
# - employee.py      → Employee / EmployeeFields and field parsers
# - record_store.py  → RecordStore and the id allocator
#
# ==============================================

from .employee import (
    Employee,
    EmployeeFields,
    format_wage,
    parse_employee_id,
    parse_wage,
)
from .record_store import MAX_ID, RecordStore

__all__ = [
    "Employee",
    "EmployeeFields",
    "MAX_ID",
    "RecordStore",
    "format_wage",
    "parse_employee_id",
    "parse_wage",
]
