"""Auth Service: identities, password hashes and opaque tokens."""

import pytest

from sku_registry.core.errors import AuthorizationError, IdentityExistsError
from sku_registry.infrastructure.passwords import hash_password, verify_password
from sku_registry.services.auth_service import (
    register_identity, issue_token, resolve_token, revoke_token,
)


def test_hash_verifies_only_the_right_password():
    stored = hash_password("correct horse", rounds=4)
    assert stored.startswith("$2b$04$")
    assert verify_password("correct horse", stored)
    assert not verify_password("wrong horse", stored)


def test_hashes_are_salted():
    assert hash_password("same", 4) != hash_password("same", 4)


def test_verify_rejects_malformed_hash():
    assert not verify_password("x", "not-a-hash")
    assert not verify_password("x", "")


def test_passwords_longer_than_bcrypt_limit_are_accepted():
    long_password = "k" * 100
    stored = hash_password(long_password, 4)
    assert verify_password(long_password, stored)
    assert not verify_password("k" * 71, stored)


async def test_register_lowercases_email(test_db):
    user = await register_identity(test_db, "Owner@Example.com", "pw-12345", 4)
    assert user.email == "owner@example.com"
    assert user.password_hash != "pw-12345"


async def test_register_duplicate_email_rejected(test_db):
    await register_identity(test_db, "a@example.com", "pw-12345", 4)
    with pytest.raises(IdentityExistsError):
        await register_identity(test_db, "A@example.com", "pw-67890", 4)


async def test_token_resolves_to_its_owner(test_db):
    user = await register_identity(test_db, "a@example.com", "pw-12345", 4)
    token = await issue_token(test_db, "a@example.com", "pw-12345")
    assert (await resolve_token(test_db, token)).id == user.id


async def test_bad_password_rejected(test_db):
    await register_identity(test_db, "a@example.com", "pw-12345", 4)
    with pytest.raises(AuthorizationError):
        await issue_token(test_db, "a@example.com", "nope-nope")


async def test_unknown_email_rejected(test_db):
    with pytest.raises(AuthorizationError):
        await issue_token(test_db, "nobody@example.com", "pw-12345")


async def test_revoked_token_no_longer_resolves(test_db):
    await register_identity(test_db, "a@example.com", "pw-12345", 4)
    token = await issue_token(test_db, "a@example.com", "pw-12345")
    await revoke_token(test_db, token)
    with pytest.raises(AuthorizationError):
        await resolve_token(test_db, token)
