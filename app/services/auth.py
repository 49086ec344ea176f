"""Authentication service: validation, password hashing and credential store access."""
import structlog
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from starlette.concurrency import run_in_threadpool

from app.core.exceptions import (
    AppError,
    CredentialError,
    NotAuthenticatedError,
    UnexpectedError,
    UserNotFoundError,
    ValidationError,
)
from app.core.security import decode_session_value, hash_password, verify_password
from app.schemas.auth import AuthResultSchema, CredentialsSchema, UserPublicSchema
from app.services.user_store import UserStore
from app.services.validation import validate_email, validate_password

logger = structlog.get_logger(__name__)


def _failure(exc: AppError) -> AuthResultSchema:
    message = exc.message
    if isinstance(exc, ValidationError):
        message = f"Invalid input: {exc.message}"
    return AuthResultSchema(success=False, message=message, status_code=exc.status_code)


class AuthService:
    """
    Register, log in and resolve session cookies.

    Every public method returns an AuthResultSchema; errors from the layers
    below are normalized here and never propagate to the caller.
    """

    def __init__(self, db: AsyncSession):
        self.store = UserStore(db)

    async def register(self, credentials: CredentialsSchema) -> AuthResultSchema:
        try:
            email = validate_email(credentials.email)
            password = validate_password(credentials.password)

            # bcrypt is slow on purpose; keep it off the event loop
            password_hash = await run_in_threadpool(hash_password, password)
            user = await self.store.create(email, password_hash)
        except AppError as exc:
            logger.info("Registration rejected", reason=type(exc).__name__)
            return _failure(exc)
        except SQLAlchemyError:
            logger.exception("Registration failed")
            return _failure(UnexpectedError())

        logger.info("User registered", user_id=user.id)
        return AuthResultSchema(
            success=True,
            message="User registered successfully",
            user=UserPublicSchema.model_validate(user),
        )

    async def login(self, credentials: CredentialsSchema) -> AuthResultSchema:
        try:
            email = validate_email(credentials.email)
            password = validate_password(credentials.password)

            user = await self.store.get_by_email(email)
            # same error for unknown email and wrong password
            if user is None:
                raise CredentialError()
            if not await run_in_threadpool(verify_password, password, user.password_hash):
                raise CredentialError()
        except AppError as exc:
            logger.info("Login rejected", reason=type(exc).__name__)
            return _failure(exc)
        except SQLAlchemyError:
            logger.exception("Login failed")
            return _failure(UnexpectedError())

        logger.info("Login successful", user_id=user.id)
        return AuthResultSchema(
            success=True,
            message="Login successful",
            user=UserPublicSchema.model_validate(user),
        )

    async def resolve_session(self, session_value: str | None) -> AuthResultSchema:
        """Map a session cookie value to the user it names."""
        try:
            user_id = decode_session_value(session_value)
            if user_id is None:
                raise NotAuthenticatedError()
            user = await self.store.get_by_id(user_id)
            if user is None:
                raise UserNotFoundError()
        except AppError as exc:
            return _failure(exc)
        except SQLAlchemyError:
            logger.exception("Session resolution failed")
            return _failure(UnexpectedError())

        return AuthResultSchema(
            success=True,
            message="Authenticated",
            user=UserPublicSchema.model_validate(user),
        )
