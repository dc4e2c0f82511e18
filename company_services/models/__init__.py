"""ORM Models — SQLAlchemy declarative models for departments, employees, timecards.

Invariants:
    - All models inherit from Base (db/base.py)
    - ORM rows never leave infrastructure/storage_gateway.py; the business layer
      sees core/entities.py dataclasses only

Design Decisions:
    - One file per table for locality
    - All models imported here so Base.metadata is complete before create_all/alembic
"""

from company_services.models.department import DepartmentRecord  # noqa: F401
from company_services.models.employee import EmployeeRecord  # noqa: F401
from company_services.models.timecard import TimecardRecord  # noqa: F401
