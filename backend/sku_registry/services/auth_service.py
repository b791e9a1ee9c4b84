"""Auth Service: identity registration and opaque bearer tokens.

Invariants:
    - Emails are compared and stored lower-cased
    - Login failures never reveal whether the email exists
    - Tokens are random, stored server-side, and valid until revoked

Design Decisions:
    - Opaque tokens over signed ones: the registry only needs a capability check
"""

import logging
import secrets

from sqlalchemy import select, delete
from sqlalchemy.ext.asyncio import AsyncSession

from sku_registry.core.errors import AuthorizationError, IdentityExistsError
from sku_registry.infrastructure.passwords import hash_password, verify_password
from sku_registry.models.access_token import AccessToken
from sku_registry.models.user import User

logger = logging.getLogger(__name__)


async def _find_user(db: AsyncSession, email: str) -> User | None:
    result = await db.execute(select(User).where(User.email == email.lower()))
    return result.scalar_one_or_none()


async def register_identity(
    db: AsyncSession, email: str, password: str, rounds: int = 12,
) -> User:
    """Create a user. Raises IdentityExistsError when the email is taken."""
    if await _find_user(db, email):
        raise IdentityExistsError(email.lower())
    user = User(
        email=email.lower(),
        password_hash=hash_password(password, rounds),
    )
    db.add(user)
    await db.commit()
    await db.refresh(user)
    logger.info(f"Identity registered: {user.id}")
    return user


async def issue_token(
    db: AsyncSession, email: str, password: str, token_bytes: int = 32,
) -> str:
    """Check credentials and return a fresh bearer token."""
    user = await _find_user(db, email)
    if not user or not verify_password(password, user.password_hash):
        raise AuthorizationError("Invalid email or password")
    token = secrets.token_urlsafe(token_bytes)
    db.add(AccessToken(token=token, user_id=user.id))
    await db.commit()
    return token


async def resolve_token(db: AsyncSession, token: str) -> User:
    """Return the user owning `token`. Raises AuthorizationError."""
    result = await db.execute(
        select(User).join(AccessToken).where(AccessToken.token == token),
    )
    user = result.scalar_one_or_none()
    if not user:
        raise AuthorizationError()
    return user


async def revoke_token(db: AsyncSession, token: str) -> None:
    await db.execute(delete(AccessToken).where(AccessToken.token == token))
    await db.commit()
