"""Department Schemas — Pydantic models for the /department API boundary.

Invariants:
    - Request fields are optional at this layer: presence, tenant and format are
      business rules, reported by the business layer with its own messages
    - Responses name the id `dept_id`

Design Decisions:
    - Pydantic still enforces JSON types (str vs int) so the business layer never
      sees a dict where a string belongs
"""

from pydantic import BaseModel

from company_services.core.entities import Department


class DepartmentCreate(BaseModel):
    """POST /department body."""
    company: str | None = None
    dept_name: str | None = None
    dept_no: str | None = None
    location: str | None = None


class DepartmentUpdate(DepartmentCreate):
    """PUT /department body — full record, replaces every field."""
    dept_id: int | None = None


class DepartmentResponse(BaseModel):
    dept_id: int
    company: str
    dept_name: str
    dept_no: str
    location: str

    @classmethod
    def from_entity(cls, department: Department) -> "DepartmentResponse":
        return cls(
            dept_id=department.id,
            company=department.company,
            dept_name=department.dept_name,
            dept_no=department.dept_no,
            location=department.location,
        )
