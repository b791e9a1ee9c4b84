"""Uniqueness Enforcement: tests for normalization and batch planning.

Tests cover:
    - normalize_code uppercases and rejects empty or whitespace-only codes
    - clean_import_lines drops blanks and the exact "SKU" header
    - plan_import dedups against existing codes and within the batch
    - build_record uses the injected clock and id factory
"""

from datetime import datetime, timezone
from uuid import UUID

import pytest

from sku_registry.core.domain_types import SkuId
from sku_registry.core.enforce_uniqueness import (
    normalize_code, code_key, clean_import_lines, plan_import, build_record,
)
from sku_registry.core.errors import SkuValidationError


def test_normalize_code_uppercases():
    assert normalize_code("ll-br-nl") == "LL-BR-NL"


def test_normalize_code_rejects_empty():
    with pytest.raises(SkuValidationError):
        normalize_code("")


def test_normalize_code_rejects_whitespace_only():
    with pytest.raises(SkuValidationError) as exc:
        normalize_code("   \t")
    assert exc.value.field == "code"


def test_code_key_is_case_insensitive():
    assert code_key("A-b-C") == code_key("a-B-c")


# ─── clean_import_lines ──────────────────────────────────────────

def test_clean_drops_header_and_blanks():
    assert clean_import_lines(["SKU", "", "   ", "A-BR-NL"]) == ["A-BR-NL"]


def test_clean_header_match_is_case_sensitive():
    assert clean_import_lines(["sku", "Sku"]) == ["sku", "Sku"]


# ─── plan_import ─────────────────────────────────────────────────

def test_plan_dedups_within_batch():
    plan = plan_import(["ll-br-nl", "LL-BR-NL", "SP-AU-R"], [])
    assert plan.accepted == ["LL-BR-NL", "SP-AU-R"]
    assert plan.duplicate_count == 1


def test_plan_dedups_against_existing_codes():
    plan = plan_import(["a-br-nl", "TO-CU-ER"], ["A-BR-NL"])
    assert plan.accepted == ["TO-CU-ER"]
    assert plan.duplicate_count == 1


def test_plan_filters_header_and_blank_before_counting():
    plan = plan_import(["SKU", "", "A-BR-NL"], [])
    assert plan.accepted == ["A-BR-NL"]
    assert plan.duplicate_count == 0


def test_plan_keeps_input_order():
    plan = plan_import(["C", "A", "B"], [])
    assert plan.accepted == ["C", "A", "B"]


def test_plan_empty_batch():
    plan = plan_import([], ["A"])
    assert plan.accepted == []
    assert plan.duplicate_count == 0


# ─── build_record ────────────────────────────────────────────────

def test_build_record_uses_injected_collaborators():
    fixed = datetime(2026, 1, 2, 3, 4, 5, tzinfo=timezone.utc)
    sku_id = SkuId(UUID("00000000-0000-0000-0000-000000000001"))
    record = build_record("A-BR-NL", "u1", lambda: fixed, lambda: sku_id)
    assert record.id == sku_id
    assert record.issued_at == fixed
    assert record.code == "A-BR-NL"
    assert record.issued_by == "u1"
