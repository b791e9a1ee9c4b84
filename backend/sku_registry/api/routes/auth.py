"""Auth Routes: identity registration, login and logout.

Invariants:
    - register and login are the only unauthenticated registry-facing endpoints
    - Responses never include password hashes
"""

from fastapi import APIRouter, Depends, Header, status
from sqlalchemy.ext.asyncio import AsyncSession

from sku_registry.api.dependencies import bearer_token, get_current_user
from sku_registry.config import get_settings
from sku_registry.infrastructure.database import get_db
from sku_registry.models.user import User
from sku_registry.schemas.auth import Credentials, IdentityResponse, TokenResponse
from sku_registry.services.auth_service import (
    register_identity, issue_token, revoke_token,
)

router = APIRouter(prefix="/api/v1/auth", tags=["auth"])


@router.post(
    "/register", response_model=IdentityResponse,
    status_code=status.HTTP_201_CREATED,
)
async def register(body: Credentials, db: AsyncSession = Depends(get_db)):
    """Create an identity. 409 when the email is already registered."""
    user = await register_identity(
        db, body.email, body.password,
        rounds=get_settings().password_hash_rounds,
    )
    return IdentityResponse(id=user.id, email=user.email)


@router.post("/login", response_model=TokenResponse)
async def login(body: Credentials, db: AsyncSession = Depends(get_db)):
    """Exchange credentials for a bearer token."""
    token = await issue_token(
        db, body.email, body.password,
        token_bytes=get_settings().auth_token_bytes,
    )
    return TokenResponse(token=token)


@router.post("/logout", status_code=status.HTTP_204_NO_CONTENT)
async def logout(
    authorization: str | None = Header(None, alias="Authorization"),
    user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    """Revoke the presented token."""
    await revoke_token(db, bearer_token(authorization))
