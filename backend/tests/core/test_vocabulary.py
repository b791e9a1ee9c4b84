"""Tests for VocabularySet construction and lookup."""

import pytest

from sku_registry.core.domain_types import VocabularyKind
from sku_registry.core.vocabulary import VocabularySet, DEFAULT_STONES


def test_defaults_keep_configured_order():
    vocab = VocabularySet()
    assert vocab.stones == DEFAULT_STONES
    assert vocab.stones[0] == "LL"
    assert vocab.corporate_clients == ("HBL", "NUMS", "DW")


def test_contains_checks_matching_sequence_only():
    vocab = VocabularySet()
    assert vocab.contains(VocabularyKind.METAL, "AU")
    assert not vocab.contains(VocabularyKind.STONE, "AU")


def test_repeated_token_rejected():
    with pytest.raises(ValueError, match="repeated"):
        VocabularySet.from_lists(["A", "A"], ["BR"], ["NL"], [])


def test_lowercase_token_rejected():
    with pytest.raises(ValueError, match="uppercase"):
        VocabularySet.from_lists(["a"], ["BR"], ["NL"], [])


def test_blank_token_rejected():
    with pytest.raises(ValueError, match="blank"):
        VocabularySet.from_lists(["A"], [""], ["NL"], [])


def test_to_dict_lists():
    vocab = VocabularySet.from_lists(["A"], ["BR"], ["NL"], ["HBL"])
    assert vocab.to_dict() == {
        "stones": ["A"],
        "metals": ["BR"],
        "products": ["NL"],
        "corporate_clients": ["HBL"],
    }
