"""Auth Schemas: credentials in, identity and token out."""

from uuid import UUID

from pydantic import BaseModel, Field, field_validator


class Credentials(BaseModel):
    email: str = Field(
        min_length=3, max_length=254, pattern=r"^[^@\s]+@[^@\s]+\.[^@\s]+$",
    )
    password: str = Field(min_length=8, max_length=128)

    @field_validator("email", mode="before")
    @classmethod
    def normalize_email(cls, v: str) -> str:
        return v.strip().lower() if isinstance(v, str) else v


class IdentityResponse(BaseModel):
    id: UUID
    email: str


class TokenResponse(BaseModel):
    token: str
    token_type: str = "bearer"
