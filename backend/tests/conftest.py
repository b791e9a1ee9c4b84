"""Root conftest: shared test configuration."""

import os

# Tests never touch a real database or the working directory's store
os.environ.setdefault(
    "DATABASE_URL",
    "sqlite+aiosqlite:///test.db",
)
os.environ.setdefault("SKU_STORE_BACKEND", "database")
os.environ.setdefault("PASSWORD_HASH_ROUNDS", "4")
