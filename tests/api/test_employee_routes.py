"""Employee Routes — HTTP round trips for employee CRUD."""


def _body(department, **overrides):
    body = {
        "company": "acme", "emp_name": "Grace", "emp_no": "E-2",
        "hire_date": "2024-01-09", "job": "Engineer", "salary": 90000,
        "dept_id": department["dept_id"], "mng_id": 0,
    }
    body.update(overrides)
    return body


async def test_create_employee(client, department):
    res = await client.post("/CompanyServices/employee", json=_body(department))
    assert res.status_code == 201
    created = res.json()["success"]
    assert created["emp_no"] == "E-2"
    assert created["hire_date"] == "2024-01-09"
    assert created["salary"] == 90000.0


async def test_sunday_hire_date_returns_400_and_stores_nothing(client, department):
    res = await client.post(
        "/CompanyServices/employee", json=_body(department, hire_date="2024-01-07"),
    )
    assert res.status_code == 400
    assert res.json()["error"]["context"]["field"] == "hire_date"
    res = await client.get("/CompanyServices/employees", params={"company": "acme"})
    assert res.status_code == 404


async def test_unknown_department_returns_404(client, department):
    res = await client.post("/CompanyServices/employee", json=_body(department, dept_id=99))
    assert res.status_code == 404


async def test_unknown_manager_returns_404(client, department):
    res = await client.post("/CompanyServices/employee", json=_body(department, mng_id=99))
    assert res.status_code == 404
    assert "Manager '99' not found" in res.json()["error"]["message"]


async def test_employee_with_existing_manager(client, employee, department):
    res = await client.post(
        "/CompanyServices/employee", json=_body(department, mng_id=employee["emp_id"]),
    )
    assert res.status_code == 201
    assert res.json()["success"]["mng_id"] == employee["emp_id"]


async def test_get_and_list_employees(client, employee):
    res = await client.get(
        "/CompanyServices/employee", params={"company": "acme", "emp_id": employee["emp_id"]},
    )
    assert res.status_code == 200
    assert res.json()["success"] == employee
    res = await client.get("/CompanyServices/employees", params={"company": "acme"})
    assert res.json()["success"] == [employee]


async def test_update_employee_noop_is_idempotent(client, employee):
    body = {k: v for k, v in employee.items()}
    res = await client.put("/CompanyServices/employee", json=body)
    assert res.status_code == 200
    assert res.json()["success"] == employee


async def test_update_missing_employee_returns_404(client, department):
    res = await client.put("/CompanyServices/employee", json=_body(department, emp_id=50))
    assert res.status_code == 404


async def test_delete_employee(client, employee):
    params = {"company": "acme", "emp_id": employee["emp_id"]}
    res = await client.delete("/CompanyServices/employee", params=params)
    assert res.status_code == 200
    res = await client.delete("/CompanyServices/employee", params=params)
    assert res.status_code == 404
