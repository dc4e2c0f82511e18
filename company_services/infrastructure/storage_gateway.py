"""SQLAlchemy Storage Gateway — StorageGateway protocol over one AsyncSession.

Invariants:
    - ORM rows never leave this module: every read returns core/entities.py objects
    - insert assigns the id (autoincrement) and returns the stored entity
    - delete_by_id returns the number of rows removed; 0 is not an error here
    - Ids outside the INTEGER column range match no row: get_by_id returns None and
      delete_by_id returns 0 without a query (Postgres would reject the bind value)
    - Every SQLAlchemy failure rolls back and surfaces as StorageError

Design Decisions:
    - Session owned by the caller (DatabaseSessionManager.session): the gateway never
      opens or closes connections, so release is guaranteed in one place
    - Commit per write: each business operation performs exactly one write
"""

import logging
from contextlib import asynccontextmanager
from dataclasses import fields
from typing import AsyncGenerator

from sqlalchemy import delete, select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from company_services.core.domain_types import EntityKind
from company_services.core.entities import Department, Employee, Entity, Timecard
from company_services.core.errors import ErrorContext, StorageError
from company_services.db.base import Base
from company_services.models.department import DepartmentRecord
from company_services.models.employee import EmployeeRecord
from company_services.models.timecard import TimecardRecord

logger = logging.getLogger(__name__)

MAX_ROW_ID = 2**31 - 1  # INTEGER primary key

_RECORDS: dict[EntityKind, type[Base]] = {
    EntityKind.DEPARTMENT: DepartmentRecord,
    EntityKind.EMPLOYEE: EmployeeRecord,
    EntityKind.TIMECARD: TimecardRecord,
}

_ENTITIES: dict[EntityKind, type] = {
    EntityKind.DEPARTMENT: Department,
    EntityKind.EMPLOYEE: Employee,
    EntityKind.TIMECARD: Timecard,
}


def _data_fields(kind: EntityKind) -> list[str]:
    return [f.name for f in fields(_ENTITIES[kind]) if f.name != "id"]


def _storable_id(entity_id: int) -> bool:
    return isinstance(entity_id, int) and 0 < entity_id <= MAX_ROW_ID


def _to_entity(kind: EntityKind, record: Base) -> Entity:
    values = {name: getattr(record, name) for name in _data_fields(kind)}
    return _ENTITIES[kind](id=record.id, **values)


class SqlAlchemyStorageGateway:
    """Department/Employee/Timecard persistence on an AsyncSession."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def get_by_id(self, kind: EntityKind, entity_id: int) -> Entity | None:
        if not _storable_id(entity_id):
            return None
        async with self._storage_op("read", kind, entity_id):
            record = await self.db.get(_RECORDS[kind], entity_id)
        return _to_entity(kind, record) if record is not None else None

    async def get_all(self, kind: EntityKind) -> list[Entity]:
        model = _RECORDS[kind]
        async with self._storage_op("read", kind):
            result = await self.db.execute(select(model).order_by(model.id))
            records = result.scalars().all()
        return [_to_entity(kind, r) for r in records]

    async def get_all_for_tenant(
        self, kind: EntityKind, tenant: str,
    ) -> list[Entity]:
        model = _RECORDS[kind]
        async with self._storage_op("read", kind):
            result = await self.db.execute(
                select(model).where(model.company == tenant).order_by(model.id),
            )
            records = result.scalars().all()
        return [_to_entity(kind, r) for r in records]

    async def insert(self, entity: Entity) -> Entity:
        kind = entity.kind
        values = {name: getattr(entity, name) for name in _data_fields(kind)}
        record = _RECORDS[kind](**values)
        async with self._storage_op("insert", kind):
            self.db.add(record)
            await self.db.commit()
            await self.db.refresh(record)
        return _to_entity(kind, record)

    async def update(self, entity: Entity) -> Entity:
        kind = entity.kind
        async with self._storage_op("update", kind, entity.id):
            record = await self.db.get(_RECORDS[kind], entity.id)
            if record is None:
                raise StorageError(
                    f"{kind.value} {entity.id} no longer exists", "update",
                    ErrorContext(entity=kind.value, entity_id=entity.id),
                )
            for name in _data_fields(kind):
                setattr(record, name, getattr(entity, name))
            await self.db.commit()
            await self.db.refresh(record)
        return _to_entity(kind, record)

    async def delete_by_id(self, kind: EntityKind, entity_id: int) -> int:
        if not _storable_id(entity_id):
            return 0
        model = _RECORDS[kind]
        async with self._storage_op("delete", kind, entity_id):
            result = await self.db.execute(delete(model).where(model.id == entity_id))
            await self.db.commit()
        return result.rowcount

    @asynccontextmanager
    async def _storage_op(
        self, operation: str, kind: EntityKind, entity_id: int | None = None,
    ) -> AsyncGenerator[None, None]:
        """Map SQLAlchemy failures to StorageError after rolling back."""
        try:
            yield
        except IntegrityError as e:
            await self.db.rollback()
            logger.error(
                f"DB integrity error during {operation}: {e}",
                extra={"entity": kind.value, "entity_id": entity_id},
            )
            raise StorageError(
                "Integrity constraint violated", operation,
                ErrorContext(entity=kind.value, entity_id=entity_id),
            )
        except SQLAlchemyError as e:
            await self.db.rollback()
            logger.error(
                f"DB error during {operation}: {e}",
                extra={"entity": kind.value, "entity_id": entity_id},
            )
            raise StorageError(
                "Database operation failed", operation,
                ErrorContext(entity=kind.value, entity_id=entity_id),
            )
