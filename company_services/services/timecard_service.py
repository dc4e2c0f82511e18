"""Timecard Service — create/update/delete/get pipelines for timecards.

Invariants:
    - create: required → tenant → employee exists → start time → end time →
      no duplicate start for the employee → insert
    - update: required → tenant → id → fetch → employee exists → start time →
      end time → no duplicate (excluding self) → overwrite → update
    - end_time strictly after start_time; duplicate start raises ConflictError
    - The referenced employee must belong to the same company as the timecard
"""

import logging

from company_services.core.domain_types import EntityKind
from company_services.core.entities import Timecard
from company_services.core.errors import ErrorContext, NotFoundError
from company_services.core.repository_protocols import StorageGateway
from company_services.core.validate_fields import (
    check_positive_id, check_tenant, require_fields,
)
from company_services.services.validation_engine import ValidationEngine

logger = logging.getLogger(__name__)


class TimecardService:
    """Business-layer operations for Timecard records."""

    def __init__(
        self, gateway: StorageGateway, tenant: str,
        engine: ValidationEngine | None = None,
    ):
        self.gateway = gateway
        self.tenant = tenant
        self.engine = engine or ValidationEngine(gateway)

    async def create_timecard(
        self, company: str, emp_id: int, start_time: str, end_time: str,
    ) -> Timecard:
        require_fields({
            "company": company, "emp_id": emp_id,
            "start_time": start_time, "end_time": end_time,
        })
        check_tenant(company, self.tenant)

        await self.engine.validate_employee_exists(emp_id, company)
        start = self.engine.validate_start_time(start_time)
        end = self.engine.validate_end_time(start, end_time)
        await self.engine.validate_no_duplicate_timecard(
            emp_id, start, company=company,
        )

        timecard = Timecard(
            company=company, emp_id=emp_id, start_time=start, end_time=end,
        )
        inserted = await self.gateway.insert(timecard)
        logger.info(
            f"Timecard {inserted.id} created for employee {emp_id}",
            extra={"company": company, "entity": "Timecard", "entity_id": inserted.id},
        )
        return inserted

    async def update_timecard(
        self, timecard_id: int, company: str, emp_id: int, start_time: str,
        end_time: str,
    ) -> Timecard:
        require_fields({
            "timecard_id": timecard_id, "company": company, "emp_id": emp_id,
            "start_time": start_time, "end_time": end_time,
        })
        check_tenant(company, self.tenant)
        check_positive_id(timecard_id, "timecard_id")

        timecard = await self._get_for_tenant(company, timecard_id)
        await self.engine.validate_employee_exists(emp_id, company)
        start = self.engine.validate_start_time(start_time)
        end = self.engine.validate_end_time(start, end_time)
        await self.engine.validate_no_duplicate_timecard(
            emp_id, start, exclude_id=timecard_id, company=company,
        )

        timecard.company = company
        timecard.emp_id = emp_id
        timecard.start_time = start
        timecard.end_time = end
        updated = await self.gateway.update(timecard)
        logger.info(
            f"Timecard {timecard_id} updated",
            extra={"company": company, "entity": "Timecard", "entity_id": timecard_id},
        )
        return updated

    async def delete_timecard(self, company: str, timecard_id: int) -> str:
        require_fields({"company": company, "timecard_id": timecard_id})
        check_tenant(company, self.tenant)
        check_positive_id(timecard_id, "timecard_id")

        deleted = await self.gateway.delete_by_id(EntityKind.TIMECARD, timecard_id)
        if deleted == 0:
            raise NotFoundError("Timecard", timecard_id, ErrorContext(company=company))
        logger.info(
            f"Timecard {timecard_id} deleted",
            extra={"company": company, "entity": "Timecard", "entity_id": timecard_id},
        )
        return f"Timecard {timecard_id} deleted."

    async def get_timecard(self, company: str, timecard_id: int) -> Timecard:
        require_fields({"company": company, "timecard_id": timecard_id})
        check_tenant(company, self.tenant)
        check_positive_id(timecard_id, "timecard_id")
        return await self._get_for_tenant(company, timecard_id)

    async def list_timecards(self, company: str, emp_id: int) -> list[Timecard]:
        """Timecards of one employee, oldest start first. Empty list when none."""
        require_fields({"company": company, "emp_id": emp_id})
        check_tenant(company, self.tenant)
        check_positive_id(emp_id, "emp_id")
        timecards = await self.gateway.get_all_for_tenant(EntityKind.TIMECARD, company)
        return sorted(
            (t for t in timecards if t.emp_id == emp_id),
            key=lambda t: t.start_time,
        )

    async def _get_for_tenant(self, company: str, timecard_id: int) -> Timecard:
        timecard = await self.gateway.get_by_id(EntityKind.TIMECARD, timecard_id)
        if timecard is None or timecard.company != company:
            raise NotFoundError("Timecard", timecard_id, ErrorContext(company=company))
        return timecard
