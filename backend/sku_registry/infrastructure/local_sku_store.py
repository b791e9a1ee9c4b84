"""Local SKU Store: JSON-file SkuStore for single-node deployments.

Invariants:
    - The file holds the full ordered list; it is rewritten whole on every change
    - Rewrites go to a temp file first and replace the original (no torn file)
    - A failed write leaves the in-memory list as it was before the call
    - path=None keeps records in memory only
    - list_records: newest first, equal timestamps ordered by code

Design Decisions:
    - File IO runs in a worker thread (asyncio.to_thread) so the event loop
      keeps serving reads while a write is in flight
"""

import asyncio
import json
import logging
import os
from datetime import datetime
from pathlib import Path
from uuid import UUID

from sku_registry.core.domain_types import SkuId, SkuRecord
from sku_registry.core.enforce_uniqueness import code_key
from sku_registry.core.errors import StoreError

logger = logging.getLogger(__name__)


def _record_to_json(record: SkuRecord) -> dict:
    return {
        "id": str(record.id),
        "code": record.code,
        "issued_at": record.issued_at.isoformat(),
        "issued_by": record.issued_by,
    }


def _record_from_json(data: dict) -> SkuRecord:
    return SkuRecord(
        id=SkuId(UUID(data["id"])),
        code=data["code"],
        issued_at=datetime.fromisoformat(data["issued_at"]),
        issued_by=data.get("issued_by"),
    )


class LocalSkuStore:
    """SkuStore persisted as a JSON list on local disk."""

    def __init__(self, path: Path | str | None = None):
        self._path = Path(path) if path is not None else None
        self._records: list[SkuRecord] | None = None

    async def _loaded(self) -> list[SkuRecord]:
        if self._records is None:
            self._records = await asyncio.to_thread(self._read)
        return self._records

    def _read(self) -> list[SkuRecord]:
        if self._path is None or not self._path.exists():
            return []
        try:
            payload = json.loads(self._path.read_text(encoding="utf-8"))
            return [_record_from_json(item) for item in payload]
        except (OSError, ValueError, KeyError, TypeError) as e:
            logger.error(f"Cannot read SKU store {self._path}: {e}")
            raise StoreError(str(e), str(self._path)) from e

    def _write(self, records: list[SkuRecord]) -> None:
        if self._path is None:
            return
        tmp = self._path.with_name(self._path.name + ".tmp")
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            tmp.write_text(
                json.dumps([_record_to_json(r) for r in records], indent=2),
                encoding="utf-8",
            )
            os.replace(tmp, self._path)
        except OSError as e:
            logger.error(f"Cannot write SKU store {self._path}: {e}")
            raise StoreError(str(e), str(self._path)) from e

    async def _commit(self, records: list[SkuRecord]) -> None:
        await asyncio.to_thread(self._write, records)
        self._records = records

    async def list_records(self) -> list[SkuRecord]:
        records = await self._loaded()
        # newest first; equal timestamps by code
        by_code = sorted(records, key=lambda r: r.code)
        return sorted(by_code, key=lambda r: r.issued_at, reverse=True)

    async def list_codes(self) -> list[str]:
        return [r.code for r in await self._loaded()]

    async def contains_code(self, code: str) -> bool:
        key = code_key(code)
        return any(code_key(r.code) == key for r in await self._loaded())

    async def add(self, record: SkuRecord) -> bool:
        if await self.contains_code(record.code):
            return False
        await self._commit([*await self._loaded(), record])
        return True

    async def remove(self, sku_id: SkuId) -> bool:
        records = await self._loaded()
        remaining = [r for r in records if r.id != sku_id]
        if len(remaining) == len(records):
            return False
        await self._commit(remaining)
        return True
