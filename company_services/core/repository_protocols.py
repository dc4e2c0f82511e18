"""Boundary Protocols — the Storage Gateway contract consumed by the business layer.

Invariants:
    - Core NEVER imports from infrastructure — dependency arrows point inward only
    - Every read/write the business layer issues goes through StorageGateway
    - Implementations raise StorageError only; "zero rows deleted" is a return value

Design Decisions:
    - Protocol over ABC: structural subtyping, test fakes need no inheritance
    - Async in Protocol: implementations do IO; the pure rules in
      core/validate_fields.py never touch it
"""

from typing import Protocol

from company_services.core.domain_types import EntityKind
from company_services.core.entities import Entity


class StorageGateway(Protocol):
    """Contract for entity persistence keyed by kind + numeric id."""
    async def get_by_id(self, kind: EntityKind, entity_id: int) -> Entity | None: ...
    async def get_all(self, kind: EntityKind) -> list[Entity]: ...
    async def get_all_for_tenant(
        self, kind: EntityKind, tenant: str,
    ) -> list[Entity]: ...
    async def insert(self, entity: Entity) -> Entity: ...
    async def update(self, entity: Entity) -> Entity: ...
    async def delete_by_id(self, kind: EntityKind, entity_id: int) -> int: ...
