"""Employee Schemas — Pydantic models for the /employee API boundary.

Invariants:
    - hire_date travels as a YYYY-MM-DD string; parsing and the weekday rule
      belong to the business layer
    - Responses name the id `emp_id`
"""

from datetime import date

from pydantic import BaseModel

from company_services.core.entities import Employee


class EmployeeCreate(BaseModel):
    """POST /employee body."""
    company: str | None = None
    emp_name: str | None = None
    emp_no: str | None = None
    hire_date: str | None = None
    job: str | None = None
    salary: float | None = None
    dept_id: int | None = None
    mng_id: int | None = None


class EmployeeUpdate(EmployeeCreate):
    """PUT /employee body — full record, replaces every field."""
    emp_id: int | None = None


class EmployeeResponse(BaseModel):
    emp_id: int
    company: str
    emp_name: str
    emp_no: str
    hire_date: date
    job: str
    salary: float
    dept_id: int
    mng_id: int

    @classmethod
    def from_entity(cls, employee: Employee) -> "EmployeeResponse":
        return cls(
            emp_id=employee.id,
            company=employee.company,
            emp_name=employee.emp_name,
            emp_no=employee.emp_no,
            hire_date=employee.hire_date,
            job=employee.job,
            salary=employee.salary,
            dept_id=employee.dept_id,
            mng_id=employee.mng_id,
        )
