"""Registry Provider: builds the process-wide SkuRegistry and hands it to routes.

Invariants:
    - Exactly one SkuRegistry per process (its lock is the serialization point)
    - Backend chosen once, at startup, from settings.sku_store_backend

Design Decisions:
    - Module-level singleton initialized in lifespan, same as db_manager
"""

import logging

from sku_registry.config import Settings
from sku_registry.core.repository_protocols import SkuStore
from sku_registry.infrastructure.database import DatabaseSessionManager
from sku_registry.infrastructure.local_sku_store import LocalSkuStore
from sku_registry.infrastructure.sql_sku_store import SqlSkuStore
from sku_registry.services.sku_registry import SkuRegistry

logger = logging.getLogger(__name__)

# Singleton (initialized on startup)
registry: SkuRegistry | None = None


def build_store(
    settings: Settings, manager: DatabaseSessionManager | None,
) -> SkuStore:
    if settings.sku_store_backend == "local":
        return LocalSkuStore(settings.sku_store_path)
    if manager is None:
        raise RuntimeError("Database store selected but database not initialized")
    return SqlSkuStore(manager)


def init_registry(
    settings: Settings, manager: DatabaseSessionManager | None,
) -> SkuRegistry:
    global registry
    registry = SkuRegistry(
        build_store(settings, manager), vocabulary=settings.vocabulary(),
    )
    logger.info(
        f"SKU registry ready ({settings.sku_store_backend} backend)",
        extra={"backend": settings.sku_store_backend},
    )
    return registry


def get_registry() -> SkuRegistry:
    """FastAPI dependency for the registry."""
    if not registry:
        raise RuntimeError("SKU registry not initialized")
    return registry
