"""Entity Model — value holders with identity by id.

Tests:
    - Fields store exactly what was assigned (no coercion)
    - Unsaved entities have no id and only equal themselves
    - Saved entities compare and hash by (type, id)
"""

from datetime import date

from company_services.core.domain_types import EntityKind
from company_services.core.entities import Department, Employee, Timecard


def test_new_entity_has_no_id():
    assert Department().id is None
    assert Employee().id is None
    assert Timecard().id is None


def test_fields_store_exact_values():
    employee = Employee(salary="100")
    assert employee.salary == "100"
    employee.hire_date = date(2024, 1, 8)
    assert employee.hire_date == date(2024, 1, 8)


def test_unsaved_entities_with_equal_fields_are_not_equal():
    a = Department(company="acme", dept_no="D-1")
    b = Department(company="acme", dept_no="D-1")
    assert a != b
    assert a == a


def test_saved_entities_compare_by_id():
    a = Department(company="acme", dept_name="Eng", id=3)
    b = Department(company="acme", dept_name="Renamed", id=3)
    assert a == b
    assert hash(a) == hash(b)
    assert a != Department(id=4)


def test_entities_of_different_types_never_equal():
    assert Department(id=1) != Employee(id=1)


def test_entities_carry_their_kind():
    assert Department.kind is EntityKind.DEPARTMENT
    assert Employee().kind is EntityKind.EMPLOYEE
    assert Timecard().kind is EntityKind.TIMECARD
