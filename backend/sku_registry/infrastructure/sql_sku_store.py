"""SQL SKU Store: database-backed SkuStore over the shared session manager.

Invariants:
    - Every method runs in its own session (one short transaction each)
    - add() returns False when the unique constraint on code refuses the row;
      it never raises for a duplicate
    - Timestamps read back without tzinfo (SQLite) are treated as UTC
    - list_records: newest first, equal timestamps ordered by code

Design Decisions:
    - Case-insensitive lookups use lower(code): stored codes are uppercased,
      so the unique constraint on code already enforces the same identity
"""

import logging
from datetime import timezone

from sqlalchemy import select, delete, func
from sqlalchemy.exc import IntegrityError

from sku_registry.core.domain_types import SkuId, SkuRecord
from sku_registry.core.enforce_uniqueness import code_key
from sku_registry.infrastructure.database import DatabaseSessionManager
from sku_registry.models.sku_record import IssuedSku

logger = logging.getLogger(__name__)


def _to_record(row: IssuedSku) -> SkuRecord:
    issued_at = row.issued_at
    if issued_at.tzinfo is None:
        issued_at = issued_at.replace(tzinfo=timezone.utc)
    return SkuRecord(
        id=SkuId(row.id), code=row.code,
        issued_at=issued_at, issued_by=row.issued_by,
    )


class SqlSkuStore:
    """SkuStore backed by the sku_records table."""

    def __init__(self, manager: DatabaseSessionManager):
        self._manager = manager

    async def list_records(self) -> list[SkuRecord]:
        async with self._manager.session() as db:
            result = await db.execute(
                select(IssuedSku).order_by(
                    IssuedSku.issued_at.desc(), IssuedSku.code.asc(),
                ),
            )
            return [_to_record(row) for row in result.scalars().all()]

    async def list_codes(self) -> list[str]:
        async with self._manager.session() as db:
            result = await db.execute(select(IssuedSku.code))
            return list(result.scalars().all())

    async def contains_code(self, code: str) -> bool:
        async with self._manager.session() as db:
            result = await db.execute(
                select(IssuedSku.id)
                .where(func.lower(IssuedSku.code) == code_key(code))
                .limit(1),
            )
            return result.first() is not None

    async def add(self, record: SkuRecord) -> bool:
        async with self._manager.session() as db:
            db.add(IssuedSku(
                id=record.id, code=record.code,
                issued_at=record.issued_at, issued_by=record.issued_by,
            ))
            try:
                await db.commit()
            except IntegrityError:
                await db.rollback()
                logger.warning(
                    f"Insert refused by unique constraint: {record.code}",
                    extra={"code": record.code},
                )
                return False
        return True

    async def remove(self, sku_id: SkuId) -> bool:
        async with self._manager.session() as db:
            result = await db.execute(
                delete(IssuedSku).where(IssuedSku.id == sku_id),
            )
            await db.commit()
            return result.rowcount > 0
