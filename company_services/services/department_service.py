"""Department Service — create/update/delete/get pipelines for departments.

Invariants:
    - Each operation is one linear fail-fast pipeline: input rules → storage reads →
      write. The first failure aborts and propagates unchanged; nothing is written
    - dept_no uniqueness is checked against every department of every company
    - Text fields longer than their columns are rejected before any storage read
    - Update is full-record replace: every field argument overwrites the stored one
    - Zero rows deleted is reported as NotFoundError

Design Decisions:
    - Tenant injected at construction (from Settings.company_name), never hardcoded
    - Returns entities, not response dicts: the HTTP layer owns the wire shape
"""

import logging

from company_services.core.domain_types import EntityKind
from company_services.core.entities import Department
from company_services.core.errors import ErrorContext, NotFoundError
from company_services.core.repository_protocols import StorageGateway
from company_services.core.validate_fields import (
    check_max_lengths, check_positive_id, check_tenant, require_fields,
)
from company_services.services.validation_engine import ValidationEngine

logger = logging.getLogger(__name__)


class DepartmentService:
    """Business-layer operations for Department records."""

    def __init__(
        self, gateway: StorageGateway, tenant: str,
        engine: ValidationEngine | None = None,
    ):
        self.gateway = gateway
        self.tenant = tenant
        self.engine = engine or ValidationEngine(gateway)

    async def create_department(
        self, company: str, dept_name: str, dept_no: str, location: str,
    ) -> Department:
        require_fields({
            "company": company, "dept_name": dept_name,
            "dept_no": dept_no, "location": location,
        })
        check_tenant(company, self.tenant)
        check_max_lengths({
            "dept_name": dept_name, "dept_no": dept_no, "location": location,
        })
        await self.engine.validate_dept_no_unique(dept_no)

        department = Department(
            company=company, dept_name=dept_name,
            dept_no=dept_no, location=location,
        )
        inserted = await self.gateway.insert(department)
        logger.info(
            f"Department {inserted.id} created ({dept_no})",
            extra={"company": company, "entity": "Department", "entity_id": inserted.id},
        )
        return inserted

    async def update_department(
        self, dept_id: int, company: str, dept_name: str, dept_no: str,
        location: str,
    ) -> Department:
        require_fields({
            "dept_id": dept_id, "company": company, "dept_name": dept_name,
            "dept_no": dept_no, "location": location,
        })
        check_tenant(company, self.tenant)
        check_positive_id(dept_id, "dept_id")
        check_max_lengths({
            "dept_name": dept_name, "dept_no": dept_no, "location": location,
        })

        department = await self._get_for_tenant(company, dept_id)
        await self.engine.validate_dept_no_unique(dept_no, exclude_id=dept_id)

        department.company = company
        department.dept_name = dept_name
        department.dept_no = dept_no
        department.location = location
        updated = await self.gateway.update(department)
        logger.info(
            f"Department {dept_id} updated",
            extra={"company": company, "entity": "Department", "entity_id": dept_id},
        )
        return updated

    async def delete_department(self, company: str, dept_id: int) -> str:
        require_fields({"company": company, "dept_id": dept_id})
        check_tenant(company, self.tenant)
        check_positive_id(dept_id, "dept_id")

        deleted = await self.gateway.delete_by_id(EntityKind.DEPARTMENT, dept_id)
        if deleted == 0:
            raise NotFoundError(
                "Department", dept_id, ErrorContext(company=company),
            )
        logger.info(
            f"Department {dept_id} deleted",
            extra={"company": company, "entity": "Department", "entity_id": dept_id},
        )
        return f"Department {dept_id} from {company} deleted."

    async def get_department(self, company: str, dept_id: int) -> Department:
        require_fields({"company": company, "dept_id": dept_id})
        check_tenant(company, self.tenant)
        check_positive_id(dept_id, "dept_id")
        return await self._get_for_tenant(company, dept_id)

    async def list_departments(self, company: str) -> list[Department]:
        """All departments of the tenant; NotFoundError when there are none."""
        require_fields({"company": company})
        check_tenant(company, self.tenant)
        departments = await self.gateway.get_all_for_tenant(
            EntityKind.DEPARTMENT, company,
        )
        if not departments:
            raise NotFoundError(
                "Departments for company", company, ErrorContext(company=company),
            )
        return departments

    async def _get_for_tenant(self, company: str, dept_id: int) -> Department:
        department = await self.gateway.get_by_id(EntityKind.DEPARTMENT, dept_id)
        if department is None or department.company != company:
            raise NotFoundError(
                "Department", dept_id, ErrorContext(company=company),
            )
        return department
