"""Boundary Protocols: contracts between core and shell.

Invariants:
    - Core NEVER imports from shell; dependency arrows point inward only
    - Every SKU storage backend implements SkuStore
    - add() refusing a record (returns False) means the backend already holds
      the code; callers treat it as a duplicate, never as a crash

Design Decisions:
    - Protocol over ABC: structural subtyping, no inheritance hierarchy
    - Async in Protocol: implementations do IO, the rules they serve stay pure
"""

from typing import Protocol

from sku_registry.core.domain_types import SkuId, SkuRecord


class SkuStore(Protocol):
    """Contract for SKU record persistence, implemented by infrastructure."""
    async def list_records(self) -> list[SkuRecord]: ...
    async def list_codes(self) -> list[str]: ...
    async def contains_code(self, code: str) -> bool: ...
    async def add(self, record: SkuRecord) -> bool: ...
    async def remove(self, sku_id: SkuId) -> bool: ...
