"""Department Routes — /CompanyServices/department(s).

Invariants:
    - Success envelope is {"success": ...}; failures are rendered by error_handlers
    - No rule lives here: presence, tenant and id checks belong to DepartmentService
"""

from fastapi import APIRouter, Depends, Query, status

from company_services.api.dependencies import get_department_service
from company_services.schemas.department import (
    DepartmentCreate, DepartmentResponse, DepartmentUpdate,
)
from company_services.services.department_service import DepartmentService

router = APIRouter(prefix="/CompanyServices", tags=["departments"])


@router.get("/department")
async def get_department(
    company: str | None = Query(None),
    dept_id: int | None = Query(None),
    service: DepartmentService = Depends(get_department_service),
):
    department = await service.get_department(company, dept_id)
    return {"success": DepartmentResponse.from_entity(department).model_dump()}


@router.get("/departments")
async def list_departments(
    company: str | None = Query(None),
    service: DepartmentService = Depends(get_department_service),
):
    departments = await service.list_departments(company)
    return {
        "success": [
            DepartmentResponse.from_entity(d).model_dump() for d in departments
        ],
    }


@router.post("/department", status_code=status.HTTP_201_CREATED)
async def create_department(
    body: DepartmentCreate,
    service: DepartmentService = Depends(get_department_service),
):
    department = await service.create_department(**body.model_dump())
    return {"success": DepartmentResponse.from_entity(department).model_dump()}


@router.put("/department")
async def update_department(
    body: DepartmentUpdate,
    service: DepartmentService = Depends(get_department_service),
):
    department = await service.update_department(**body.model_dump())
    return {"success": DepartmentResponse.from_entity(department).model_dump()}


@router.delete("/department")
async def delete_department(
    company: str | None = Query(None),
    dept_id: int | None = Query(None),
    service: DepartmentService = Depends(get_department_service),
):
    return {"success": await service.delete_department(company, dept_id)}
