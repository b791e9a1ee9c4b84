"""Error Hierarchy: tests for codes, statuses and the REST envelope."""

from sku_registry.core.errors import (
    SkuRegistryError, SkuValidationError, DuplicateCodeError,
    AuthorizationError, IdentityExistsError, ErrorCategory,
)


def test_duplicate_error_envelope():
    err = DuplicateCodeError("A-BR-NL")
    body = err.to_response()["error"]
    assert err.http_status == 409
    assert body["code"] == "DUPLICATE_SKU"
    assert body["category"] == "conflict"
    assert body["context"]["code"] == "A-BR-NL"


def test_validation_error_carries_field():
    err = SkuValidationError("Please select stone", "stone")
    assert err.field == "stone"
    assert err.http_status == 400
    assert isinstance(err, SkuRegistryError)


def test_authorization_error_category():
    err = AuthorizationError()
    assert err.http_status == 401
    assert err.category is ErrorCategory.AUTHORIZATION


def test_identity_exists_is_conflict():
    assert IdentityExistsError("a@b.co").http_status == 409
