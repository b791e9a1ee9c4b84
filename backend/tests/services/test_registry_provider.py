"""Registry provider: backend selection and singleton wiring."""

import pytest

from sku_registry.config import Settings
from sku_registry.infrastructure.local_sku_store import LocalSkuStore
from sku_registry.infrastructure.sql_sku_store import SqlSkuStore
import sku_registry.services.registry_provider as registry_module
from sku_registry.services.registry_provider import (
    build_store, init_registry, get_registry,
)


@pytest.fixture(autouse=True)
def restore_registry():
    original = registry_module.registry
    yield
    registry_module.registry = original


def test_local_backend_builds_file_store(tmp_path):
    settings = Settings(
        sku_store_backend="local", sku_store_path=str(tmp_path / "skus.json"),
    )
    assert isinstance(build_store(settings, None), LocalSkuStore)


def test_database_backend_builds_sql_store(test_manager):
    settings = Settings(sku_store_backend="database")
    assert isinstance(build_store(settings, test_manager), SqlSkuStore)


def test_database_backend_without_manager_fails():
    with pytest.raises(RuntimeError):
        build_store(Settings(sku_store_backend="database"), None)


def test_get_registry_before_init_fails():
    registry_module.registry = None
    with pytest.raises(RuntimeError):
        get_registry()


def test_init_registry_uses_configured_vocabulary(tmp_path):
    settings = Settings(
        sku_store_backend="local",
        sku_store_path=str(tmp_path / "skus.json"),
        vocabulary_stones=["OP"],
        vocabulary_metals=["PT"],
        vocabulary_products=["R"],
        vocabulary_corporate_clients=[],
    )
    registry = init_registry(settings, None)
    assert get_registry() is registry
    assert registry.vocabulary.stones == ("OP",)


async def test_local_registry_persists_codes(tmp_path):
    settings = Settings(
        sku_store_backend="local", sku_store_path=str(tmp_path / "skus.json"),
    )
    await init_registry(settings, None).register("op-pt-r")
    reopened = init_registry(settings, None)
    assert [r.code for r in await reopened.list_records()] == ["OP-PT-R"]
