"""Employee Routes — /CompanyServices/employee(s)."""

from fastapi import APIRouter, Depends, Query, status

from company_services.api.dependencies import get_employee_service
from company_services.schemas.employee import (
    EmployeeCreate, EmployeeResponse, EmployeeUpdate,
)
from company_services.services.employee_service import EmployeeService

router = APIRouter(prefix="/CompanyServices", tags=["employees"])


@router.get("/employee")
async def get_employee(
    company: str | None = Query(None),
    emp_id: int | None = Query(None),
    service: EmployeeService = Depends(get_employee_service),
):
    employee = await service.get_employee(company, emp_id)
    return {"success": EmployeeResponse.from_entity(employee).model_dump(mode="json")}


@router.get("/employees")
async def list_employees(
    company: str | None = Query(None),
    service: EmployeeService = Depends(get_employee_service),
):
    employees = await service.list_employees(company)
    return {
        "success": [
            EmployeeResponse.from_entity(e).model_dump(mode="json") for e in employees
        ],
    }


@router.post("/employee", status_code=status.HTTP_201_CREATED)
async def create_employee(
    body: EmployeeCreate,
    service: EmployeeService = Depends(get_employee_service),
):
    employee = await service.create_employee(**body.model_dump())
    return {"success": EmployeeResponse.from_entity(employee).model_dump(mode="json")}


@router.put("/employee")
async def update_employee(
    body: EmployeeUpdate,
    service: EmployeeService = Depends(get_employee_service),
):
    employee = await service.update_employee(**body.model_dump())
    return {"success": EmployeeResponse.from_entity(employee).model_dump(mode="json")}


@router.delete("/employee")
async def delete_employee(
    company: str | None = Query(None),
    emp_id: int | None = Query(None),
    service: EmployeeService = Depends(get_employee_service),
):
    return {"success": await service.delete_employee(company, emp_id)}
