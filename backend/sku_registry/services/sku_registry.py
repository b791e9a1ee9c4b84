"""SKU Registry: the single owner of a registry's read-check-write sequences.

Invariants:
    - register, import_batch and delete_record run under one asyncio.Lock, so two
      concurrent registrations of the same code cannot both pass the check
    - list_records and compute_stats take the same lock: never see a half-applied batch
    - Failed registration leaves the store unchanged
    - import_batch never raises for a per-line duplicate; it only tallies

Design Decisions:
    - Impureim sandwich: read from the store, decide with core/ rules, write back
    - Clock and id factory injected: tests pin time and ids
    - A store refusing add() (cross-process race) counts as a duplicate
"""

import asyncio
import logging
from collections.abc import Iterable

from sku_registry.core.compose_code import compose_code
from sku_registry.core.domain_types import (
    SkuId, SkuRecord, ImportResult, RegistryStats, CompositionMode,
    Clock, IdFactory, utc_now, new_sku_id,
)
from sku_registry.core.enforce_uniqueness import (
    normalize_code, plan_import, build_record,
)
from sku_registry.core.errors import DuplicateCodeError, ErrorContext
from sku_registry.core.registry_stats import compute_stats
from sku_registry.core.repository_protocols import SkuStore
from sku_registry.core.vocabulary import VocabularySet

logger = logging.getLogger(__name__)


class SkuRegistry:
    """Issues, imports, deletes and counts SKUs over a pluggable SkuStore."""

    def __init__(
        self,
        store: SkuStore,
        vocabulary: VocabularySet | None = None,
        clock: Clock = utc_now,
        id_factory: IdFactory = new_sku_id,
    ):
        self._store = store
        self._clock = clock
        self._id_factory = id_factory
        self._lock = asyncio.Lock()
        self.vocabulary = vocabulary or VocabularySet()

    async def register(
        self, code: str, issued_by: str | None = None,
    ) -> SkuRecord:
        """Issue one code. Raises SkuValidationError or DuplicateCodeError."""
        normalized = normalize_code(code)
        async with self._lock:
            if await self._store.contains_code(normalized):
                self._reject(normalized, issued_by)
            record = build_record(
                normalized, issued_by, self._clock, self._id_factory,
            )
            if not await self._store.add(record):
                self._reject(normalized, issued_by)
        logger.info(
            f"SKU issued: {record.code}",
            extra={"sku_id": record.id, "code": record.code, "issued_by": issued_by},
        )
        return record

    def _reject(self, code: str, issued_by: str | None) -> None:
        logger.warning(
            f"Duplicate SKU rejected: {code}",
            extra={"code": code, "issued_by": issued_by, "error_code": "DUPLICATE_SKU"},
        )
        raise DuplicateCodeError(code, ErrorContext(code=code, issued_by=issued_by))

    async def compose_and_register(
        self,
        stone: str,
        metal: str,
        product: str,
        mode: CompositionMode | str = CompositionMode.PRODUCT,
        corporate_client: str | None = None,
        custom_suffix: str | None = None,
        issued_by: str | None = None,
    ) -> SkuRecord:
        """Compose a code against this registry's vocabulary, then register it."""
        code = compose_code(
            stone, metal, product, mode,
            corporate_client=corporate_client,
            custom_suffix=custom_suffix,
            vocabulary=self.vocabulary,
        )
        return await self.register(code, issued_by)

    async def import_batch(
        self, raw_codes: Iterable[str], issued_by: str | None = None,
    ) -> ImportResult:
        """Ingest candidates in order; duplicates (in-batch too) are skipped."""
        async with self._lock:
            plan = plan_import(raw_codes, await self._store.list_codes())
            imported = 0
            duplicates = plan.duplicate_count
            for code in plan.accepted:
                record = build_record(
                    code, issued_by, self._clock, self._id_factory,
                )
                if await self._store.add(record):
                    imported += 1
                else:
                    duplicates += 1
        result = ImportResult(imported_count=imported, duplicate_count=duplicates)
        logger.info(
            f"SKU import: {imported} imported, {duplicates} duplicates",
            extra={
                "issued_by": issued_by,
                "imported_count": imported,
                "duplicate_count": duplicates,
            },
        )
        return result

    async def delete_record(self, sku_id: SkuId) -> None:
        """Remove a record by id. Unknown ids are a no-op."""
        async with self._lock:
            removed = await self._store.remove(sku_id)
        if removed:
            logger.info(f"SKU {sku_id} deleted", extra={"sku_id": sku_id})

    async def list_records(self) -> list[SkuRecord]:
        """All records, most-recent-first."""
        async with self._lock:
            return await self._store.list_records()

    async def compute_stats(self) -> RegistryStats:
        async with self._lock:
            codes = await self._store.list_codes()
        return compute_stats(codes)
