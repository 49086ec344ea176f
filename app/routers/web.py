"""Web routes: landing (login/register forms) and dashboard. Jinja2 templates."""
from typing import Annotated

from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

from app.core.config import APP_DIR, get_settings
from app.core.security import BCRYPT_MAX_BYTES
from app.routers.deps import get_identity
from app.services.identity import IdentityCache
from app.services.nutrition import build_chart_series, generate_mock_intake

router = APIRouter()
templates = Jinja2Templates(directory=str(APP_DIR / "templates"))


def _render(request: Request, name: str, identity: IdentityCache, **context) -> HTMLResponse:
    settings = get_settings()
    return templates.TemplateResponse(
        request,
        name,
        {
            "app_name": settings.app_name,
            "identity": identity,
            "current_user": identity.user,
            "password_min_length": settings.password_min_length,
            "password_max_length": settings.password_max_length,
            "password_significant_bytes": BCRYPT_MAX_BYTES,
            **context,
        },
    )


@router.get("/", response_class=HTMLResponse)
async def home(request: Request, identity: Annotated[IdentityCache, Depends(get_identity)]):
    return _render(request, "home.html", identity, mode="login")


@router.get("/login", response_class=HTMLResponse)
async def login_page(
    request: Request,
    identity: Annotated[IdentityCache, Depends(get_identity)],
    registered: bool = False,
):
    return _render(request, "home.html", identity, mode="login", registered=registered)


@router.get("/register", response_class=HTMLResponse)
async def register_page(request: Request, identity: Annotated[IdentityCache, Depends(get_identity)]):
    return _render(request, "home.html", identity, mode="register")


@router.get("/dashboard", response_class=HTMLResponse)
async def dashboard(request: Request, identity: Annotated[IdentityCache, Depends(get_identity)]):
    """Welcome message plus the 30-day nutrition chart."""
    return _render(
        request,
        "dashboard.html",
        identity,
        chart=build_chart_series(generate_mock_intake()),
    )
