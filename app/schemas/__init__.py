from app.schemas.auth import (
    AuthResultSchema,
    CredentialsSchema,
    MessageSchema,
    UserPublicSchema,
    UserResponseSchema,
)
from app.schemas.nutrition import DailyIntakeSchema

__all__ = [
    "AuthResultSchema",
    "CredentialsSchema",
    "DailyIntakeSchema",
    "MessageSchema",
    "UserPublicSchema",
    "UserResponseSchema",
]
