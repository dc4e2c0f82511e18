"""API test fixtures — FastAPI app over in-memory SQLite.

Invariants:
    - get_db overridden to hand out sessions from the per-test engine
    - db_manager patched so the readiness probe sees the test engine
    - Tenant is "acme" (set in the root conftest before settings are cached)
"""

import pytest
from httpx import ASGITransport, AsyncClient

import company_services.infrastructure.database as db_module
from company_services.infrastructure.database import DatabaseSessionManager, get_db
from company_services.main import app


@pytest.fixture
async def client(test_engine, test_session_factory):
    """FastAPI test client with DB dependency overridden."""
    async def override_get_db():
        async with test_session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db

    original_manager = db_module.db_manager
    fake_manager = DatabaseSessionManager.__new__(DatabaseSessionManager)
    fake_manager.engine = test_engine
    fake_manager._session_factory = test_session_factory
    db_module.db_manager = fake_manager

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
    db_module.db_manager = original_manager


@pytest.fixture
async def department(client):
    res = await client.post("/CompanyServices/department", json={
        "company": "acme", "dept_name": "Eng", "dept_no": "D-100", "location": "NY",
    })
    assert res.status_code == 201
    return res.json()["success"]


@pytest.fixture
async def employee(client, department):
    res = await client.post("/CompanyServices/employee", json={
        "company": "acme", "emp_name": "Ada", "emp_no": "E-1",
        "hire_date": "2024-01-08", "job": "Engineer", "salary": 100000,
        "dept_id": department["dept_id"], "mng_id": 0,
    })
    assert res.status_code == 201
    return res.json()["success"]
