"""Application Configuration: environment-driven settings via pydantic-settings.

Invariants:
    - All secrets come from environment variables (never hardcoded)
    - get_settings() is cached (lru_cache): single instance per process
    - Vocabulary lists are validated once, when the VocabularySet is built

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support
    - Defaults provided for all non-secret settings: works out-of-the-box with docker-compose
"""

from functools import lru_cache
from typing import Literal

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from sku_registry.core.vocabulary import (
    VocabularySet,
    DEFAULT_STONES, DEFAULT_METALS, DEFAULT_PRODUCTS, DEFAULT_CORPORATE_CLIENTS,
)


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Database
    database_url: str = (
        "postgresql+asyncpg://sku:sku@db:5432/sku_registry"
    )

    @field_validator("database_url", mode="before")
    @classmethod
    def convert_postgres_url(cls, v: str) -> str:
        """Hosted providers hand out postgresql:// but asyncpg needs postgresql+asyncpg://."""
        if isinstance(v, str) and v.startswith("postgresql://"):
            return v.replace("postgresql://", "postgresql+asyncpg://", 1)
        return v

    database_pool_size: int = 20
    database_max_overflow: int = 10

    # SKU storage: "database" (SQL tables) or "local" (JSON file)
    sku_store_backend: Literal["database", "local"] = "database"
    sku_store_path: str = "skus.json"

    # Vocabulary
    vocabulary_stones: list[str] = list(DEFAULT_STONES)
    vocabulary_metals: list[str] = list(DEFAULT_METALS)
    vocabulary_products: list[str] = list(DEFAULT_PRODUCTS)
    vocabulary_corporate_clients: list[str] = list(DEFAULT_CORPORATE_CLIENTS)

    # Auth
    password_hash_rounds: int = 12
    auth_token_bytes: int = 32

    # API
    cors_origins: list[str] = ["http://localhost:3000"]

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"

    def vocabulary(self) -> VocabularySet:
        return VocabularySet.from_lists(
            self.vocabulary_stones,
            self.vocabulary_metals,
            self.vocabulary_products,
            self.vocabulary_corporate_clients,
        )


@lru_cache
def get_settings() -> Settings:
    return Settings()
