"""Auth API: register, login, logout, current user. Session held in the `session` cookie."""
from typing import Annotated

import structlog
from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import JSONResponse

from app.routers.deps import get_auth_service
from app.schemas.auth import (
    AuthResultSchema,
    CredentialsSchema,
    MessageSchema,
    UserResponseSchema,
)
from app.services.auth import AuthService
from app.services.session import issue_session, read_session, revoke_session

router = APIRouter(prefix="/auth", tags=["auth"])
logger = structlog.get_logger(__name__)


def _json(result: AuthResultSchema | MessageSchema | UserResponseSchema, status_code: int) -> JSONResponse:
    return JSONResponse(result.model_dump(mode="json", exclude_none=True), status_code=status_code)


@router.post("/register", status_code=status.HTTP_201_CREATED, response_model=AuthResultSchema)
async def register(
    body: CredentialsSchema,
    auth: Annotated[AuthService, Depends(get_auth_service)],
):
    """Create a user. Does not log the user in."""
    result = await auth.register(body)
    if result.success:
        return _json(result, status.HTTP_201_CREATED)
    return _json(result, result.status_code or status.HTTP_400_BAD_REQUEST)


@router.post("/login", response_model=AuthResultSchema)
async def login(
    body: CredentialsSchema,
    auth: Annotated[AuthService, Depends(get_auth_service)],
):
    """Check credentials and set the session cookie."""
    result = await auth.login(body)
    if not result.success:
        # validation and credential failures are all 401 here
        if result.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR:
            return _json(result, status.HTTP_500_INTERNAL_SERVER_ERROR)
        return _json(result, status.HTTP_401_UNAUTHORIZED)

    response = _json(result, status.HTTP_200_OK)
    issue_session(response, result.user.id)
    return response


@router.post("/logout", response_model=MessageSchema)
async def logout():
    """Clear the session cookie."""
    logger.info("Logged out")
    response = _json(MessageSchema(success=True, message="Logged out successfully"), status.HTTP_200_OK)
    revoke_session(response)
    return response


@router.get("/user", response_model=UserResponseSchema)
async def current_user(
    request: Request,
    auth: Annotated[AuthService, Depends(get_auth_service)],
):
    """Resolve the session cookie to the user record (without password hash)."""
    result = await auth.resolve_session(read_session(request))
    if not result.success:
        return _json(MessageSchema(success=False, message=result.message), result.status_code)
    return _json(UserResponseSchema(user=result.user), status.HTTP_200_OK)
