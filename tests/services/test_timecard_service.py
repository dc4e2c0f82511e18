"""Timecard Service — temporal rules and duplicate-start conflicts.

Tests cover:
    - create stores parsed timestamps; a second create with the same start conflicts
    - end_time <= start_time rejected before any write
    - missing employee, or one of another company, raises NotFoundError
    - update may keep its own start_time; list is per employee, oldest first
"""

from dataclasses import asdict
from datetime import date, datetime

import pytest

from company_services.core.domain_types import EntityKind
from company_services.core.entities import Employee, Timecard
from company_services.core.errors import ConflictError, NotFoundError, ValidationError


async def test_create_timecard(timecard_service, gateway, seed_employee):
    created = await timecard_service.create_timecard(
        "acme", seed_employee.id, "2024-01-09 09:00:00", "2024-01-09 17:00:00",
    )
    assert created.id is not None
    assert created.start_time == datetime(2024, 1, 9, 9, 0)
    assert created.end_time == datetime(2024, 1, 9, 17, 0)
    assert gateway.writes == [("insert", EntityKind.TIMECARD)]


async def test_second_timecard_with_same_start_conflicts(timecard_service, gateway, seed_employee):
    await timecard_service.create_timecard(
        "acme", seed_employee.id, "2024-01-09 09:00:00", "2024-01-09 17:00:00",
    )
    with pytest.raises(ConflictError):
        await timecard_service.create_timecard(
            "acme", seed_employee.id, "2024-01-09T09:00:00", "2024-01-09 12:00:00",
        )
    assert len(gateway.rows[EntityKind.TIMECARD]) == 1


@pytest.mark.parametrize("end", ["2024-01-09 09:00:00", "2024-01-09 08:00:00"])
async def test_end_not_after_start_fails(timecard_service, gateway, seed_employee, end):
    with pytest.raises(ValidationError, match="must be after start_time"):
        await timecard_service.create_timecard(
            "acme", seed_employee.id, "2024-01-09 09:00:00", end,
        )
    assert gateway.writes == []


async def test_malformed_start_fails(timecard_service, seed_employee):
    with pytest.raises(ValidationError, match="start_time"):
        await timecard_service.create_timecard(
            "acme", seed_employee.id, "nine o'clock", "2024-01-09 17:00:00",
        )


async def test_missing_fields_fail_before_storage(timecard_service, gateway):
    with pytest.raises(ValidationError, match="Missing required fields: start_time"):
        await timecard_service.create_timecard("acme", 1, None, "2024-01-09 17:00:00")
    assert gateway.calls == []


async def test_missing_employee_fails(timecard_service, gateway):
    with pytest.raises(NotFoundError, match="Employee '5' not found"):
        await timecard_service.create_timecard(
            "acme", 5, "2024-01-09 09:00:00", "2024-01-09 17:00:00",
        )
    assert gateway.writes == []


async def test_update_timecard_keeping_start_is_allowed(timecard_service, seed_timecard):
    updated = await timecard_service.update_timecard(
        seed_timecard.id, "acme", seed_timecard.emp_id,
        "2024-01-08 09:00:00", "2024-01-08 18:30:00",
    )
    assert updated.end_time == datetime(2024, 1, 8, 18, 30)


async def test_update_timecard_noop_is_idempotent(timecard_service, seed_timecard):
    before = await timecard_service.get_timecard("acme", seed_timecard.id)
    await timecard_service.update_timecard(
        before.id, before.company, before.emp_id,
        before.start_time.isoformat(), before.end_time.isoformat(),
    )
    after = await timecard_service.get_timecard("acme", seed_timecard.id)
    assert asdict(after) == asdict(before)


async def test_update_timecard_onto_other_start_conflicts(timecard_service, gateway, seed_timecard):
    other = gateway.seed(Timecard(
        company="acme", emp_id=seed_timecard.emp_id,
        start_time=datetime(2024, 1, 9, 9, 0), end_time=datetime(2024, 1, 9, 17, 0),
    ))
    with pytest.raises(ConflictError):
        await timecard_service.update_timecard(
            other.id, "acme", other.emp_id, "2024-01-08 09:00:00", "2024-01-08 10:00:00",
        )
    assert gateway.writes == []


async def test_update_missing_timecard_fails(timecard_service, seed_employee):
    with pytest.raises(NotFoundError, match="Timecard '3' not found"):
        await timecard_service.update_timecard(
            3, "acme", seed_employee.id, "2024-01-08 09:00:00", "2024-01-08 10:00:00",
        )


async def test_delete_timecard(timecard_service, gateway, seed_timecard):
    await timecard_service.delete_timecard("acme", seed_timecard.id)
    assert gateway.rows[EntityKind.TIMECARD] == {}


async def test_delete_missing_timecard_raises_not_found(timecard_service, gateway, seed_timecard):
    with pytest.raises(NotFoundError):
        await timecard_service.delete_timecard("acme", seed_timecard.id + 1)
    assert seed_timecard.id in gateway.rows[EntityKind.TIMECARD]


async def test_list_timecards_per_employee_oldest_first(timecard_service, gateway, seed_timecard):
    gateway.seed(Timecard(
        company="acme", emp_id=seed_timecard.emp_id,
        start_time=datetime(2024, 1, 5, 9, 0), end_time=datetime(2024, 1, 5, 17, 0),
    ))
    gateway.seed(Timecard(
        company="acme", emp_id=seed_timecard.emp_id + 1,
        start_time=datetime(2024, 1, 6, 9, 0), end_time=datetime(2024, 1, 6, 17, 0),
    ))
    timecards = await timecard_service.list_timecards("acme", seed_timecard.emp_id)
    assert [t.start_time.day for t in timecards] == [5, 8]


async def test_list_timecards_empty_is_allowed(timecard_service, seed_employee):
    assert await timecard_service.list_timecards("acme", seed_employee.id) == []


async def test_employee_of_other_company_is_not_found(timecard_service, gateway):
    other = gateway.seed(Employee(
        company="globex", emp_name="Eve", emp_no="G-1", hire_date=date(2024, 1, 9),
        job="Ops", salary=1.0, dept_id=1, mng_id=0,
    ))
    with pytest.raises(NotFoundError, match=f"Employee '{other.id}' not found"):
        await timecard_service.create_timecard(
            "acme", other.id, "2024-01-09 09:00:00", "2024-01-09 17:00:00",
        )
    assert gateway.writes == []
