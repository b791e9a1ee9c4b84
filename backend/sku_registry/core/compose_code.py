"""Code Composition: builds the canonical SKU string from selected segments.

Invariants:
    - Segment order is fixed: stone, metal, product, [corporate client], [suffix]
    - Exactly one SEGMENT_SEPARATOR between adjacent present segments
    - Client segment only in corporate mode; suffix in any mode
    - No case or whitespace canonicalization; callers normalize before lookup

Design Decisions:
    - Vocabulary membership is checked only when a VocabularySet is passed:
      raw-code callers (import, manual entry) compose nothing and validate nothing
"""

from sku_registry.core.domain_types import (
    CompositionMode, VocabularyKind, SEGMENT_SEPARATOR,
)
from sku_registry.core.errors import SkuValidationError
from sku_registry.core.vocabulary import VocabularySet


_REQUIRED_FIELDS: tuple[tuple[str, VocabularyKind], ...] = (
    ("stone", VocabularyKind.STONE),
    ("metal", VocabularyKind.METAL),
    ("product", VocabularyKind.PRODUCT),
)


def _parse_mode(mode: CompositionMode | str) -> CompositionMode:
    try:
        return CompositionMode(mode)
    except ValueError:
        raise SkuValidationError(
            f"Unknown composition mode: {mode!r}", "mode",
        ) from None


def compose_code(
    stone: str,
    metal: str,
    product: str,
    mode: CompositionMode | str = CompositionMode.PRODUCT,
    corporate_client: str | None = None,
    custom_suffix: str | None = None,
    vocabulary: VocabularySet | None = None,
) -> str:
    """Join the selected segments into a SKU code. Pure, no IO.

    Raises SkuValidationError when stone, metal or product is empty, when the
    mode is unknown, or (with a vocabulary) when a token is not a member of
    its vocabulary.
    """
    values = {"stone": stone, "metal": metal, "product": product}
    missing = [name for name, _ in _REQUIRED_FIELDS if not values[name]]
    if missing:
        raise SkuValidationError(
            f"Please select {', '.join(missing)}", missing[0],
        )

    parsed_mode = _parse_mode(mode)
    segments = [stone, metal, product]
    with_client = parsed_mode is CompositionMode.CORPORATE and bool(corporate_client)
    if with_client:
        segments.append(corporate_client)
    if custom_suffix:
        segments.append(custom_suffix)

    if vocabulary is not None:
        checks = [(name, kind, values[name]) for name, kind in _REQUIRED_FIELDS]
        if with_client:
            checks.append((
                "corporate_client", VocabularyKind.CORPORATE_CLIENT,
                corporate_client,
            ))
        for name, kind, token in checks:
            if not vocabulary.contains(kind, token):
                raise SkuValidationError(
                    f"'{token}' is not a known {kind.value} token", name,
                )

    return SEGMENT_SEPARATOR.join(segments)
