"""Domain Types: rich types that replace bare primitives across the codebase.

Invariants:
    - SkuId and UserId wrap UUIDs; never use bare UUID in domain logic
    - SkuRecord is frozen: records are never edited, only deleted
    - All valid modes encoded as Enums; no raw string matching

Design Decisions:
    - NewType for identities: zero runtime cost, full type-checker support
    - str Enums: serialize to JSON without custom encoders
"""

import uuid
from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime, timezone
from enum import Enum
from typing import NewType
from uuid import UUID


# ─── Identity Types ──────────────────────────────────────────────

SkuId = NewType("SkuId", UUID)
UserId = NewType("UserId", UUID)


# ─── Constants ───────────────────────────────────────────────────

SEGMENT_SEPARATOR: str = "-"
CSV_HEADER_TOKEN: str = "SKU"
CSV_TIMESTAMP_COLUMN: str = "Timestamp"
MAX_IMPORT_LINES: int = 50_000


# ─── Enums ───────────────────────────────────────────────────────

class CompositionMode(str, Enum):
    """Composer mode: corporate mode carries the client segment."""
    PRODUCT = "product"
    CORPORATE = "corporate"


class VocabularyKind(str, Enum):
    """The four controlled vocabularies a code is assembled from."""
    STONE = "stone"
    METAL = "metal"
    PRODUCT = "product"
    CORPORATE_CLIENT = "corporate_client"


# ─── Records ─────────────────────────────────────────────────────

@dataclass(frozen=True)
class SkuRecord:
    """An issued SKU. `code` is stored uppercased."""
    id: SkuId
    code: str
    issued_at: datetime
    issued_by: str | None = None


@dataclass(frozen=True)
class ImportResult:
    imported_count: int
    duplicate_count: int


@dataclass(frozen=True)
class RegistryStats:
    total: int
    duplicates: int
    unique: int


# ─── Injected collaborators ──────────────────────────────────────

Clock = Callable[[], datetime]
IdFactory = Callable[[], SkuId]


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def new_sku_id() -> SkuId:
    return SkuId(uuid.uuid4())
