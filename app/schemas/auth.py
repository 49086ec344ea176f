"""Pydantic schemas for credentials, users and auth results."""
from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class CredentialsSchema(BaseModel):
    # plain strings: format/length checks live in the validation layer so
    # failures come back as AuthResult instead of a 422
    email: str | None = None
    password: str | None = None


class UserPublicSchema(BaseModel):
    """User without password_hash. The only user shape that leaves the service."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    email: str
    created_at: datetime | None = None
    updated_at: datetime | None = None


class AuthResultSchema(BaseModel):
    success: bool
    message: str
    user: UserPublicSchema | None = None
    # HTTP status of the failure kind; never serialized
    status_code: int | None = Field(default=None, exclude=True)


class UserResponseSchema(BaseModel):
    success: bool = True
    user: UserPublicSchema


class MessageSchema(BaseModel):
    success: bool
    message: str
