"""Registry Stats: pure aggregate counts over issued codes.

Invariants:
    - duplicates counts colliding code identities (lower-cased groups of size > 1),
      not the number of extra records
    - unique = total - duplicates
    - Never mutates its input
"""

from collections import Counter
from collections.abc import Iterable

from sku_registry.core.domain_types import RegistryStats
from sku_registry.core.enforce_uniqueness import code_key


def compute_stats(codes: Iterable[str]) -> RegistryStats:
    """Compute total/duplicates/unique from the registry's codes. Pure, no IO."""
    groups = Counter(code_key(code) for code in codes)
    total = sum(groups.values())
    duplicates = sum(1 for size in groups.values() if size > 1)
    return RegistryStats(total=total, duplicates=duplicates, unique=total - duplicates)
