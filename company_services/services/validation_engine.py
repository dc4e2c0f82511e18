"""Validation Engine — one check per business rule, consulting storage only to read.

Invariants:
    - Every check either returns (optionally the parsed value / fetched record) or
      raises the most specific error: ValidationError, NotFoundError, ConflictError
    - Checks NEVER write; the only side effect is the read issued to the gateway
    - Checks never run concurrently — callers await them in a fixed order so the
      first failure reported is deterministic

Design Decisions:
    - Decomposed checks: the services choose the ordered subset for create vs update
    - exclude_id on uniqueness checks: an update that keeps its own dept_no, emp_no
      or start_time must not collide with itself
    - Pure checks (hire date, timestamps) delegate to core/validate_fields.py and are
      exposed here so the engine offers the full rule set in one place
"""

from datetime import date, datetime

from company_services.core.domain_types import EntityKind
from company_services.core.entities import Employee
from company_services.core.errors import (
    ConflictError, ErrorContext, NotFoundError, ValidationError,
)
from company_services.core.repository_protocols import StorageGateway
from company_services.core.validate_fields import (
    check_end_after_start, parse_hire_date, parse_timestamp,
)


class ValidationEngine:
    """Referential-integrity, uniqueness and temporal checks."""

    def __init__(self, gateway: StorageGateway, no_manager_id: int = 0):
        self.gateway = gateway
        self.no_manager_id = no_manager_id

    # ─── Reference checks ───────────────────────────────────────

    async def validate_department_exists(self, company: str, dept_id: int) -> None:
        """Department dept_id exists and belongs to company."""
        department = await self.gateway.get_by_id(EntityKind.DEPARTMENT, dept_id)
        if department is None or department.company != company:
            raise NotFoundError(
                "Department", dept_id,
                ErrorContext(company=company, field="dept_id"),
            )

    async def validate_manager_exists(self, mng_id: int) -> None:
        """Manager exists, or mng_id is the no-manager sentinel."""
        if mng_id == self.no_manager_id:
            return
        manager = await self.gateway.get_by_id(EntityKind.EMPLOYEE, mng_id)
        if manager is None:
            raise NotFoundError(
                "Manager", mng_id, ErrorContext(entity="Employee", field="mng_id"),
            )

    async def validate_employee_exists(
        self, emp_id: int, company: str | None = None,
    ) -> Employee:
        """Employee emp_id exists and, when company is given, belongs to it."""
        employee = await self.gateway.get_by_id(EntityKind.EMPLOYEE, emp_id)
        if employee is None or (company is not None and employee.company != company):
            raise NotFoundError(
                "Employee", emp_id, ErrorContext(company=company, field="emp_id"),
            )
        return employee

    # ─── Uniqueness checks ──────────────────────────────────────

    async def validate_employee_number_unique(
        self, emp_no: str, exclude_id: int | None = None,
    ) -> None:
        employees = await self.gateway.get_all(EntityKind.EMPLOYEE)
        if any(e.emp_no == emp_no and e.id != exclude_id for e in employees):
            raise ValidationError(
                f"emp_no '{emp_no}' is not unique", field="emp_no",
            )

    async def validate_dept_no_unique(
        self, dept_no: str, exclude_id: int | None = None,
    ) -> None:
        """dept_no is unique across the full department collection (every company)."""
        departments = await self.gateway.get_all(EntityKind.DEPARTMENT)
        if any(d.dept_no == dept_no and d.id != exclude_id for d in departments):
            raise ValidationError(
                f"dept_no '{dept_no}' is not unique across all companies",
                field="dept_no",
            )

    async def validate_no_duplicate_timecard(
        self, emp_id: int, start: datetime, exclude_id: int | None = None,
        company: str | None = None,
    ) -> None:
        """Employee has no other timecard starting at exactly `start`.

        With company given only that tenant's timecards are read; an employee's
        timecards always carry the employee's company.
        """
        if company is None:
            timecards = await self.gateway.get_all(EntityKind.TIMECARD)
        else:
            timecards = await self.gateway.get_all_for_tenant(
                EntityKind.TIMECARD, company,
            )
        for timecard in timecards:
            if (
                timecard.emp_id == emp_id
                and timecard.start_time == start
                and timecard.id != exclude_id
            ):
                raise ConflictError(
                    f"Employee {emp_id} already has a timecard starting at "
                    f"{start.isoformat(sep=' ')} (timecard {timecard.id})",
                    ErrorContext(entity="Timecard", entity_id=timecard.id),
                )

    # ─── Temporal checks (pure) ─────────────────────────────────

    @staticmethod
    def validate_hire_date(value: object) -> date:
        return parse_hire_date(value)

    @staticmethod
    def validate_start_time(value: object) -> datetime:
        return parse_timestamp(value, "start_time")

    @staticmethod
    def validate_end_time(start: datetime, end: object) -> datetime:
        """end parses and falls strictly after the already-parsed start."""
        parsed = parse_timestamp(end, "end_time")
        check_end_after_start(start, parsed)
        return parsed
