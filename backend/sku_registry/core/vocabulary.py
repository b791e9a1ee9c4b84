"""Vocabulary: the controlled token lists SKUs are composed from.

Invariants:
    - Each sequence keeps its configured order (the composer shows it as-is)
    - Tokens are non-empty, uppercase, and unique within their sequence
    - VocabularySet is immutable once built; it is configuration, not user data
"""

from dataclasses import dataclass
from collections.abc import Iterable

from sku_registry.core.domain_types import VocabularyKind


DEFAULT_STONES: tuple[str, ...] = (
    "LL", "A", "SP", "TO", "AQ", "EM", "AME",
    "NP", "AJ", "QU", "ID", "GA", "PE", "CT",
)
DEFAULT_METALS: tuple[str, ...] = ("BR", "SL", "AU", "CU", "SS", "LA")
DEFAULT_PRODUCTS: tuple[str, ...] = (
    "NL", "R", "B", "ER", "PD", "BG", "CL",
    "ST", "PT", "CG", "HD", "FR", "TM", "TH",
)
DEFAULT_CORPORATE_CLIENTS: tuple[str, ...] = ("HBL", "NUMS", "DW")


def _check_tokens(kind: VocabularyKind, tokens: tuple[str, ...]) -> None:
    seen: set[str] = set()
    for token in tokens:
        if not token or token != token.strip():
            raise ValueError(f"{kind.value} vocabulary has a blank or padded token: {token!r}")
        if token != token.upper():
            raise ValueError(f"{kind.value} vocabulary token must be uppercase: {token!r}")
        if token in seen:
            raise ValueError(f"{kind.value} vocabulary token repeated: {token!r}")
        seen.add(token)


@dataclass(frozen=True)
class VocabularySet:
    """Stones, metals, products and corporate clients, in display order."""
    stones: tuple[str, ...] = DEFAULT_STONES
    metals: tuple[str, ...] = DEFAULT_METALS
    products: tuple[str, ...] = DEFAULT_PRODUCTS
    corporate_clients: tuple[str, ...] = DEFAULT_CORPORATE_CLIENTS

    def __post_init__(self) -> None:
        for kind in VocabularyKind:
            _check_tokens(kind, self.tokens(kind))

    @classmethod
    def from_lists(
        cls,
        stones: Iterable[str],
        metals: Iterable[str],
        products: Iterable[str],
        corporate_clients: Iterable[str],
    ) -> "VocabularySet":
        return cls(
            stones=tuple(stones),
            metals=tuple(metals),
            products=tuple(products),
            corporate_clients=tuple(corporate_clients),
        )

    def tokens(self, kind: VocabularyKind) -> tuple[str, ...]:
        return {
            VocabularyKind.STONE: self.stones,
            VocabularyKind.METAL: self.metals,
            VocabularyKind.PRODUCT: self.products,
            VocabularyKind.CORPORATE_CLIENT: self.corporate_clients,
        }[kind]

    def contains(self, kind: VocabularyKind, token: str) -> bool:
        return token in self.tokens(kind)

    def to_dict(self) -> dict[str, list[str]]:
        return {
            "stones": list(self.stones),
            "metals": list(self.metals),
            "products": list(self.products),
            "corporate_clients": list(self.corporate_clients),
        }
