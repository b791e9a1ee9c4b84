"""SKU Schemas: Pydantic models with field-level validation for the registry API.

Invariants:
    - SkuCreate.code: stripped, 1-120 chars
    - SkuCompose tokens are stripped; empty optional segments become None
    - Response models mirror core records (SkuRecord, ImportResult, RegistryStats)

Design Decisions:
    - Required composition fields accept "" so the registry, not Pydantic,
      reports which field is missing (same error whichever client calls)
"""

from datetime import datetime
from typing import Literal
from uuid import UUID

from pydantic import BaseModel, Field, field_validator

from sku_registry.core.domain_types import (
    SkuRecord, ImportResult, RegistryStats, MAX_IMPORT_LINES,
)


class SkuCreate(BaseModel):
    """Manual entry of an already-composed code."""
    code: str = Field(min_length=1, max_length=120)

    @field_validator("code")
    @classmethod
    def strip_code(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("code cannot be empty or whitespace")
        return v


class SkuCompose(BaseModel):
    """Form-driven composition: vocabulary tokens plus optional segments."""
    stone: str = Field("", max_length=20)
    metal: str = Field("", max_length=20)
    product: str = Field("", max_length=20)
    mode: Literal["product", "corporate"] = "product"
    corporate_client: str | None = Field(None, max_length=20)
    custom_suffix: str | None = Field(None, max_length=40)

    @field_validator("stone", "metal", "product")
    @classmethod
    def strip_token(cls, v: str) -> str:
        return v.strip()

    @field_validator("corporate_client", "custom_suffix")
    @classmethod
    def blank_to_none(cls, v: str | None) -> str | None:
        if v is None:
            return None
        return v.strip() or None


class SkuImport(BaseModel):
    """Bulk import: one candidate code per entry (CSV lines, already split)."""
    codes: list[str] = Field(max_length=MAX_IMPORT_LINES)

    @field_validator("codes")
    @classmethod
    def strip_codes(cls, v: list[str]) -> list[str]:
        return [c.strip() for c in v]


class SkuResponse(BaseModel):
    id: UUID
    code: str
    issued_at: datetime
    issued_by: str | None = None

    @classmethod
    def from_record(cls, record: SkuRecord) -> "SkuResponse":
        return cls(
            id=record.id, code=record.code,
            issued_at=record.issued_at, issued_by=record.issued_by,
        )


class ImportResponse(BaseModel):
    imported_count: int
    duplicate_count: int

    @classmethod
    def from_result(cls, result: ImportResult) -> "ImportResponse":
        return cls(
            imported_count=result.imported_count,
            duplicate_count=result.duplicate_count,
        )


class StatsResponse(BaseModel):
    total: int
    duplicates: int
    unique: int

    @classmethod
    def from_stats(cls, stats: RegistryStats) -> "StatsResponse":
        return cls(total=stats.total, duplicates=stats.duplicates, unique=stats.unique)


class VocabularyResponse(BaseModel):
    stones: list[str]
    metals: list[str]
    products: list[str]
    corporate_clients: list[str]
