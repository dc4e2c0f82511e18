"""Employee ORM — persists an employee of a company.

Invariants:
    - dept_id references departments.id
    - mng_id is a plain integer: the no-manager sentinel is not a real row
    - emp_no is unique

Design Decisions:
    - salary as Float: the business rule only requires a non-negative number
    - timecards cascade on delete (ON DELETE CASCADE on timecards.emp_id)
"""

from datetime import date

from sqlalchemy import String, Integer, Float, Date, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column

from company_services.db.base import Base


class EmployeeRecord(Base):
    """Employee row."""
    __tablename__ = "employees"
    __table_args__ = {"sqlite_autoincrement": True}

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    company: Mapped[str] = mapped_column(String(50), nullable=False, index=True)
    emp_name: Mapped[str] = mapped_column(String(100), nullable=False)
    emp_no: Mapped[str] = mapped_column(String(20), nullable=False, unique=True)
    hire_date: Mapped[date] = mapped_column(Date, nullable=False)
    job: Mapped[str] = mapped_column(String(100), nullable=False)
    salary: Mapped[float] = mapped_column(Float, nullable=False)
    dept_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("departments.id"), nullable=False,
    )
    mng_id: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
