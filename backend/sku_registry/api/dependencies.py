"""Request Dependencies: caller identity from the Authorization header.

Invariants:
    - Only "Bearer <token>" is accepted; anything else is AuthorizationError
    - The resolved User is request-scoped; the registry only sees its id string
"""

from fastapi import Depends, Header
from sqlalchemy.ext.asyncio import AsyncSession

from sku_registry.core.errors import AuthorizationError
from sku_registry.infrastructure.database import get_db
from sku_registry.models.user import User
from sku_registry.services.auth_service import resolve_token


def bearer_token(authorization: str | None) -> str:
    """Extract the token from an Authorization header value."""
    if not authorization:
        raise AuthorizationError("Missing Authorization header")
    parts = authorization.split()
    if len(parts) != 2 or parts[0].lower() != "bearer" or not parts[1]:
        raise AuthorizationError(
            "Invalid Authorization header format. Use: Bearer <token>",
        )
    return parts[1]


async def get_current_user(
    authorization: str | None = Header(None, alias="Authorization"),
    db: AsyncSession = Depends(get_db),
) -> User:
    """Dependency that validates the bearer token and returns its owner."""
    return await resolve_token(db, bearer_token(authorization))
