"""Tests for compute_stats: colliding identities, not extra records."""

from sku_registry.core.registry_stats import compute_stats


def test_empty_registry():
    stats = compute_stats([])
    assert (stats.total, stats.duplicates, stats.unique) == (0, 0, 0)


def test_one_colliding_identity():
    stats = compute_stats(["A-B-C", "a-b-c", "X-Y-Z"])
    assert stats.total == 3
    assert stats.duplicates == 1
    assert stats.unique == 2


def test_three_way_collision_counts_once():
    stats = compute_stats(["A-B-C", "a-b-c", "A-b-C", "X"])
    assert stats.total == 4
    assert stats.duplicates == 1
    assert stats.unique == 3


def test_two_colliding_identities():
    stats = compute_stats(["A", "a", "B", "b", "C"])
    assert stats.duplicates == 2
    assert stats.unique == 3


def test_all_distinct():
    stats = compute_stats(["LL-BR-NL", "SP-AU-R"])
    assert stats.duplicates == 0
    assert stats.unique == 2
