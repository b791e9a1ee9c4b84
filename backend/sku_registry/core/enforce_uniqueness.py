"""Uniqueness Enforcement: pure rules behind register and batch import.

Invariants:
    - Stored codes are uppercased; identity comparison is case-insensitive
    - plan_import is PURE: returns the accepted candidates, does NOT touch storage
    - A candidate's duplicate check sees every earlier candidate accepted in
      the same batch, so identical codes within one batch are accepted once
    - Blank entries and the exact header token "SKU" are never candidates

Design Decisions:
    - Shell (services/sku_registry.py) holds the lock and persists; this module
      only decides, so the same rules back every storage backend
"""

from collections.abc import Iterable
from dataclasses import dataclass, field

from sku_registry.core.domain_types import (
    SkuRecord, Clock, IdFactory, CSV_HEADER_TOKEN,
)
from sku_registry.core.errors import SkuValidationError


def normalize_code(code: str) -> str:
    """Uppercase a code for storage. Raises SkuValidationError if blank."""
    if not code or not code.strip():
        raise SkuValidationError("SKU code cannot be empty", "code")
    return code.upper()


def code_key(code: str) -> str:
    """Case-insensitive identity of a code."""
    return code.lower()


def clean_import_lines(raw_codes: Iterable[str]) -> list[str]:
    """Drop CSV artifacts: blank lines and the literal header token."""
    return [
        raw for raw in raw_codes
        if raw and raw.strip() and raw != CSV_HEADER_TOKEN
    ]


@dataclass
class ImportPlan:
    """Outcome of planning a batch against the existing codes."""
    accepted: list[str] = field(default_factory=list)
    duplicate_count: int = 0


def plan_import(
    raw_codes: Iterable[str], existing_codes: Iterable[str],
) -> ImportPlan:
    """Decide which candidates to issue, in input order. Pure, no IO."""
    seen = {code_key(c) for c in existing_codes}
    plan = ImportPlan()
    for raw in clean_import_lines(raw_codes):
        code = raw.upper()
        key = code_key(code)
        if key in seen:
            plan.duplicate_count += 1
            continue
        seen.add(key)
        plan.accepted.append(code)
    return plan


def build_record(
    code: str, issued_by: str | None, clock: Clock, id_factory: IdFactory,
) -> SkuRecord:
    """Create a fresh record from injected clock and id factory."""
    return SkuRecord(
        id=id_factory(), code=code, issued_at=clock(), issued_by=issued_by,
    )
