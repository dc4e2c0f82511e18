"""Service test fixtures — fake gateway and services wired to the "acme" tenant.

Invariants:
    - Every test gets a fresh InMemoryStorageGateway
    - Seed helpers write straight into the fake so the call log starts empty
"""

from datetime import date, datetime

import pytest

from company_services.core.entities import Department, Employee, Timecard
from company_services.services.department_service import DepartmentService
from company_services.services.employee_service import EmployeeService
from company_services.services.timecard_service import TimecardService
from company_services.services.validation_engine import ValidationEngine
from tests.services.fake_gateway import InMemoryStorageGateway

TENANT = "acme"


@pytest.fixture
def gateway():
    return InMemoryStorageGateway()


@pytest.fixture
def engine(gateway):
    return ValidationEngine(gateway, no_manager_id=0)


@pytest.fixture
def department_service(gateway):
    return DepartmentService(gateway, TENANT)


@pytest.fixture
def employee_service(gateway):
    return EmployeeService(gateway, TENANT, no_manager_id=0)


@pytest.fixture
def timecard_service(gateway):
    return TimecardService(gateway, TENANT)


@pytest.fixture
def seed_department(gateway):
    return gateway.seed(Department(
        company=TENANT, dept_name="Eng", dept_no="D-100", location="NY",
    ))


@pytest.fixture
def seed_employee(gateway, seed_department):
    return gateway.seed(Employee(
        company=TENANT, emp_name="Ada", emp_no="E-1",
        hire_date=date(2024, 1, 8), job="Engineer", salary=100000.0,
        dept_id=seed_department.id, mng_id=0,
    ))


@pytest.fixture
def seed_timecard(gateway, seed_employee):
    return gateway.seed(Timecard(
        company=TENANT, emp_id=seed_employee.id,
        start_time=datetime(2024, 1, 8, 9, 0), end_time=datetime(2024, 1, 8, 17, 0),
    ))
