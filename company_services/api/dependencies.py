"""Route Dependencies — per-request storage gateway and business services.

Invariants:
    - Every route reaches storage through get_db: one session per request, closed
      on every exit path by DatabaseSessionManager.session()
    - Tenant, sentinel and emp_no pattern come from Settings, never from routes
"""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from company_services.config import Settings, get_settings
from company_services.infrastructure.database import get_db
from company_services.infrastructure.storage_gateway import SqlAlchemyStorageGateway
from company_services.services.department_service import DepartmentService
from company_services.services.employee_service import EmployeeService
from company_services.services.timecard_service import TimecardService
from company_services.services.validation_engine import ValidationEngine


def get_storage_gateway(
    db: AsyncSession = Depends(get_db),
) -> SqlAlchemyStorageGateway:
    return SqlAlchemyStorageGateway(db)


def get_validation_engine(
    gateway: SqlAlchemyStorageGateway = Depends(get_storage_gateway),
    settings: Settings = Depends(get_settings),
) -> ValidationEngine:
    return ValidationEngine(gateway, no_manager_id=settings.no_manager_id)


def get_department_service(
    gateway: SqlAlchemyStorageGateway = Depends(get_storage_gateway),
    engine: ValidationEngine = Depends(get_validation_engine),
    settings: Settings = Depends(get_settings),
) -> DepartmentService:
    return DepartmentService(gateway, settings.company_name, engine=engine)


def get_employee_service(
    gateway: SqlAlchemyStorageGateway = Depends(get_storage_gateway),
    engine: ValidationEngine = Depends(get_validation_engine),
    settings: Settings = Depends(get_settings),
) -> EmployeeService:
    return EmployeeService(
        gateway, settings.company_name,
        emp_no_pattern=settings.emp_no_pattern, engine=engine,
    )


def get_timecard_service(
    gateway: SqlAlchemyStorageGateway = Depends(get_storage_gateway),
    engine: ValidationEngine = Depends(get_validation_engine),
    settings: Settings = Depends(get_settings),
) -> TimecardService:
    return TimecardService(gateway, settings.company_name, engine=engine)
