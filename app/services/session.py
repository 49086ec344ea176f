"""Session cookie issue/revoke. The cookie is the whole session state."""
from datetime import datetime, timezone

from fastapi import Request, Response

from app.core.config import get_settings
from app.core.security import encode_session_value

EPOCH = datetime.fromtimestamp(0, tz=timezone.utc)


def _cookie_flags() -> dict:
    # must be identical on issue and revoke or the browser keeps the old cookie
    settings = get_settings()
    return {
        "httponly": True,
        "samesite": "lax",
        "secure": settings.is_production,
        "path": "/",
    }


def issue_session(response: Response, user_id: int) -> None:
    settings = get_settings()
    response.set_cookie(
        key=settings.session_cookie_name,
        value=encode_session_value(user_id),
        max_age=settings.session_cookie_max_age,
        **_cookie_flags(),
    )


def revoke_session(response: Response) -> None:
    """Overwrite the cookie with an empty value that expired at the epoch."""
    response.set_cookie(
        key=get_settings().session_cookie_name,
        value="",
        expires=EPOCH,
        **_cookie_flags(),
    )


def read_session(request: Request) -> str | None:
    return request.cookies.get(get_settings().session_cookie_name) or None
