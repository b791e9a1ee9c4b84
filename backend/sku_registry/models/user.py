"""User ORM: registered identities allowed to operate the registry.

Invariants:
    - email is unique and stored lower-cased
    - password_hash is never returned by any endpoint
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import String, DateTime
from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy.dialects.postgresql import UUID

from sku_registry.db.base import Base


class User(Base):
    """Registered identity."""
    __tablename__ = "users"

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), primary_key=True, default=uuid.uuid4,
    )
    email: Mapped[str] = mapped_column(
        String(254), nullable=False, unique=True,
    )
    password_hash: Mapped[str] = mapped_column(String(255), nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )

    tokens: Mapped[list["AccessToken"]] = relationship(
        "AccessToken", back_populates="user",
        cascade="all, delete-orphan", lazy="selectin",
    )
