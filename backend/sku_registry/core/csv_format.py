"""CSV Format: SKU list import parsing and export rendering.

Invariants:
    - Import reads only the first column of each row, whitespace-trimmed
    - Header and blank filtering is left to plan_import (same rules as JSON import)
    - Export header is exactly "SKU,Timestamp"; timestamps are ISO-8601
"""

import csv
import io
from collections.abc import Iterable
from datetime import date

from sku_registry.core.domain_types import (
    SkuRecord, CSV_HEADER_TOKEN, CSV_TIMESTAMP_COLUMN,
)


def parse_import_csv(text: str) -> list[str]:
    """Extract raw candidate codes from CSV text. Pure, no IO."""
    text = text.lstrip("\ufeff")
    return [
        row[0].strip() if row else ""
        for row in csv.reader(io.StringIO(text))
    ]


def render_export_csv(records: Iterable[SkuRecord]) -> str:
    """Render records as SKU,Timestamp CSV text."""
    output = io.StringIO()
    writer = csv.writer(output, lineterminator="\n")
    writer.writerow([CSV_HEADER_TOKEN, CSV_TIMESTAMP_COLUMN])
    for record in records:
        writer.writerow([record.code, record.issued_at.isoformat()])
    return output.getvalue()


def export_filename(today: date) -> str:
    return f"SKU_List_{today.isoformat()}.csv"
