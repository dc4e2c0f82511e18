"""Entity Model — Department, Employee and Timecard value holders.

Invariants:
    - Fields store exactly the value assigned (no coercion, no validation)
    - id is None until the Storage Gateway inserts the entity
    - Equality/hash by (type, id) once an id is assigned; identity before that

Design Decisions:
    - Plain dataclasses: all rules live in core/validate_fields.py and the
      ValidationEngine, so entities stay trivially constructible in tests
    - eq=False + explicit __eq__/__hash__: dataclass field equality would make two
      unsaved records with equal fields compare equal
"""

from dataclasses import dataclass
from datetime import date, datetime

from company_services.core.domain_types import EntityKind


class _IdentifiedEntity:
    """Identity-by-id mixin for stored entities."""

    id: int | None
    kind: EntityKind

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if type(self) is not type(other):
            return NotImplemented
        if self.id is None or other.id is None:
            return False
        return self.id == other.id

    def __hash__(self) -> int:
        if self.id is None:
            return id(self)
        return hash((type(self).__name__, self.id))


@dataclass(eq=False)
class Department(_IdentifiedEntity):
    company: str | None = None
    dept_name: str | None = None
    dept_no: str | None = None
    location: str | None = None
    id: int | None = None

    kind = EntityKind.DEPARTMENT


@dataclass(eq=False)
class Employee(_IdentifiedEntity):
    company: str | None = None
    emp_name: str | None = None
    emp_no: str | None = None
    hire_date: date | None = None
    job: str | None = None
    salary: float | None = None
    dept_id: int | None = None
    mng_id: int | None = None
    id: int | None = None

    kind = EntityKind.EMPLOYEE


@dataclass(eq=False)
class Timecard(_IdentifiedEntity):
    company: str | None = None
    emp_id: int | None = None
    start_time: datetime | None = None
    end_time: datetime | None = None
    id: int | None = None

    kind = EntityKind.TIMECARD


Entity = Department | Employee | Timecard
