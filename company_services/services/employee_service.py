"""Employee Service — create/update/delete/get pipelines for employees.

Invariants:
    - Rule order is fixed and always applied:
        create: required → tenant → salary → emp_no format → lengths → department →
                manager → hire date → emp_no unique → insert
        update: required → tenant → id → salary → emp_no format → lengths → fetch →
                department → manager → hire date → emp_no unique (excluding self)
                → overwrite all fields → update
    - A rejected hire date (weekend, unparseable) aborts before any write
    - mng_id equal to the configured sentinel means "no manager"

Design Decisions:
    - hire_date stored as the parsed date: the stored value is exactly what was validated
    - Full-record replace on update (no merge): callers resend every field
"""

import logging

from company_services.core.domain_types import EntityKind
from company_services.core.entities import Employee
from company_services.core.errors import ErrorContext, NotFoundError
from company_services.core.repository_protocols import StorageGateway
from company_services.core.validate_fields import (
    check_emp_no_format, check_max_lengths, check_positive_id, check_salary,
    check_tenant, require_fields,
)
from company_services.services.validation_engine import ValidationEngine

logger = logging.getLogger(__name__)

DEFAULT_EMP_NO_PATTERN = r"^[A-Za-z0-9_-]{1,20}$"


class EmployeeService:
    """Business-layer operations for Employee records."""

    def __init__(
        self,
        gateway: StorageGateway,
        tenant: str,
        no_manager_id: int = 0,
        emp_no_pattern: str = DEFAULT_EMP_NO_PATTERN,
        engine: ValidationEngine | None = None,
    ):
        self.gateway = gateway
        self.tenant = tenant
        self.emp_no_pattern = emp_no_pattern
        self.engine = engine or ValidationEngine(gateway, no_manager_id)

    async def create_employee(
        self,
        company: str,
        emp_name: str,
        emp_no: str,
        hire_date: str,
        job: str,
        salary: float,
        dept_id: int,
        mng_id: int,
    ) -> Employee:
        require_fields({
            "company": company, "emp_name": emp_name, "emp_no": emp_no,
            "hire_date": hire_date, "job": job, "salary": salary,
            "dept_id": dept_id, "mng_id": mng_id,
        })
        check_tenant(company, self.tenant)
        check_salary(salary)
        check_emp_no_format(emp_no, self.emp_no_pattern)
        check_max_lengths({"emp_name": emp_name, "emp_no": emp_no, "job": job})

        await self.engine.validate_department_exists(company, dept_id)
        await self.engine.validate_manager_exists(mng_id)
        parsed_hire_date = self.engine.validate_hire_date(hire_date)
        await self.engine.validate_employee_number_unique(emp_no)

        employee = Employee(
            company=company,
            emp_name=emp_name,
            emp_no=emp_no,
            hire_date=parsed_hire_date,
            job=job,
            salary=salary,
            dept_id=dept_id,
            mng_id=mng_id,
        )
        inserted = await self.gateway.insert(employee)
        logger.info(
            f"Employee {inserted.id} created ({emp_no})",
            extra={"company": company, "entity": "Employee", "entity_id": inserted.id},
        )
        return inserted

    async def update_employee(
        self,
        emp_id: int,
        company: str,
        emp_name: str,
        emp_no: str,
        hire_date: str,
        job: str,
        salary: float,
        dept_id: int,
        mng_id: int,
    ) -> Employee:
        require_fields({
            "emp_id": emp_id, "company": company, "emp_name": emp_name,
            "emp_no": emp_no, "hire_date": hire_date, "job": job,
            "salary": salary, "dept_id": dept_id, "mng_id": mng_id,
        })
        check_tenant(company, self.tenant)
        check_positive_id(emp_id, "emp_id")
        check_salary(salary)
        check_emp_no_format(emp_no, self.emp_no_pattern)
        check_max_lengths({"emp_name": emp_name, "emp_no": emp_no, "job": job})

        employee = await self._get_for_tenant(company, emp_id)
        await self.engine.validate_department_exists(company, dept_id)
        await self.engine.validate_manager_exists(mng_id)
        parsed_hire_date = self.engine.validate_hire_date(hire_date)
        await self.engine.validate_employee_number_unique(emp_no, exclude_id=emp_id)

        employee.company = company
        employee.emp_name = emp_name
        employee.emp_no = emp_no
        employee.hire_date = parsed_hire_date
        employee.job = job
        employee.salary = salary
        employee.dept_id = dept_id
        employee.mng_id = mng_id
        updated = await self.gateway.update(employee)
        logger.info(
            f"Employee {emp_id} updated",
            extra={"company": company, "entity": "Employee", "entity_id": emp_id},
        )
        return updated

    async def delete_employee(self, company: str, emp_id: int) -> str:
        require_fields({"company": company, "emp_id": emp_id})
        check_tenant(company, self.tenant)
        check_positive_id(emp_id, "emp_id")

        deleted = await self.gateway.delete_by_id(EntityKind.EMPLOYEE, emp_id)
        if deleted == 0:
            raise NotFoundError("Employee", emp_id, ErrorContext(company=company))
        logger.info(
            f"Employee {emp_id} deleted",
            extra={"company": company, "entity": "Employee", "entity_id": emp_id},
        )
        return f"Employee {emp_id} deleted."

    async def get_employee(self, company: str, emp_id: int) -> Employee:
        require_fields({"company": company, "emp_id": emp_id})
        check_tenant(company, self.tenant)
        check_positive_id(emp_id, "emp_id")
        return await self._get_for_tenant(company, emp_id)

    async def list_employees(self, company: str) -> list[Employee]:
        """All employees of the tenant; NotFoundError when there are none."""
        require_fields({"company": company})
        check_tenant(company, self.tenant)
        employees = await self.gateway.get_all_for_tenant(EntityKind.EMPLOYEE, company)
        if not employees:
            raise NotFoundError(
                "Employees for company", company, ErrorContext(company=company),
            )
        return employees

    async def _get_for_tenant(self, company: str, emp_id: int) -> Employee:
        employee = await self.gateway.get_by_id(EntityKind.EMPLOYEE, emp_id)
        if employee is None or employee.company != company:
            raise NotFoundError("Employee", emp_id, ErrorContext(company=company))
        return employee
