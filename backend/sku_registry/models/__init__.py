"""ORM Models: SQLAlchemy declarative models for all persisted entities.

Invariants:
    - All models inherit from Base (db/base.py)

Design Decisions:
    - One file per entity for locality
    - All models imported here so SQLAlchemy resolves string-based relationship()
      references before any query runs
"""

from sku_registry.models.sku_record import IssuedSku  # noqa: F401
from sku_registry.models.user import User  # noqa: F401
from sku_registry.models.access_token import AccessToken  # noqa: F401
