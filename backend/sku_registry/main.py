"""SKU Registry API: FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map SkuRegistryError -> structured JSON responses
    - CORS configured from settings (not hardcoded)
    - Database and registry initialized on startup via lifespan context manager
"""

import logging
import os
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from sku_registry.api.error_handlers import register_error_handlers
from sku_registry.infrastructure.database import init_db
from sku_registry.infrastructure.observability import setup_logging
from sku_registry.services.registry_provider import init_registry
from sku_registry.config import get_settings
from sku_registry.api.routes import auth, health, registry_overview, skus

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    manager = init_db(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
    )
    init_registry(settings, manager)
    logger.info("SKU Registry API started")
    yield
    logger.info("SKU Registry API shutting down")
    await manager.dispose()


app = FastAPI(
    title="SKU Registry API", version="1.0.0", lifespan=lifespan,
)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(auth.router)
app.include_router(skus.router)
app.include_router(registry_overview.router)

register_error_handlers(app)

# Static files: serves the composer UI build when present.
# Mounted AFTER API routes so /api/v1/* takes precedence.
if os.path.isdir("static"):
    app.mount("/", StaticFiles(directory="static", html=True), name="static")
