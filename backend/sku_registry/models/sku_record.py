"""IssuedSku ORM: one row per issued SKU code.

Invariants:
    - id is UUID primary key, generated by the registry (not the database)
    - code is stored uppercased and is UNIQUE: a second writer racing on the
      same code gets an IntegrityError instead of a second row
    - Rows are never updated; only inserted and deleted

Design Decisions:
    - issued_by is a plain string (caller id), not a FK: records outlive identities
    - issued_at indexed: the list endpoint orders by it, most-recent-first
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import String, DateTime
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.dialects.postgresql import UUID

from sku_registry.db.base import Base


class IssuedSku(Base):
    """Issued SKU row; mirrors core SkuRecord."""
    __tablename__ = "sku_records"

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), primary_key=True, default=uuid.uuid4,
    )
    code: Mapped[str] = mapped_column(
        String(120), nullable=False, unique=True,
    )
    issued_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        index=True,
        default=lambda: datetime.now(timezone.utc),
    )
    issued_by: Mapped[str | None] = mapped_column(
        String(64), nullable=True,
    )
