"""FastAPI dependencies shared by the API and web routers."""
from typing import Annotated

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from app.db.session import get_db
from app.services.auth import AuthService
from app.services.identity import IdentityCache
from app.services.session import read_session


def get_auth_service(db: Annotated[AsyncSession, Depends(get_db)]) -> AuthService:
    return AuthService(db)


async def get_identity(
    request: Request,
    auth: Annotated[AuthService, Depends(get_auth_service)],
) -> IdentityCache:
    """Identity for this request, resolved once from the session cookie."""
    identity = getattr(request.state, "identity", None)
    if identity is not None:
        return identity

    identity = IdentityCache()
    result = await auth.resolve_session(read_session(request))
    if result.success:
        identity.resolved(result.user)
    else:
        identity.resolve_failed()
    request.state.identity = identity
    return identity
