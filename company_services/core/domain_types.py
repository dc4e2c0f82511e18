"""Domain Types — identity types and entity kinds shared across the codebase.

Invariants:
    - DepartmentId, EmployeeId, TimecardId wrap positive ints assigned by storage
    - EntityKind is the only key the Storage Gateway accepts for typed lookups

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enum: value doubles as the human-readable entity name in error messages
"""

from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

DepartmentId = NewType("DepartmentId", int)
EmployeeId = NewType("EmployeeId", int)
TimecardId = NewType("TimecardId", int)


# ─── Enums ───────────────────────────────────────────────────────

class EntityKind(str, Enum):
    """Entity types known to the Storage Gateway."""
    DEPARTMENT = "Department"
    EMPLOYEE = "Employee"
    TIMECARD = "Timecard"
