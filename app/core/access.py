"""Route-level access decision based on the session cookie."""
from collections.abc import Iterable
from dataclasses import dataclass

DASHBOARD_PATH = "/dashboard"
LANDING_PATH = "/"


@dataclass(frozen=True)
class GateDecision:
    """Either let the request through or send the client elsewhere."""

    redirect_to: str | None = None

    @property
    def proceed(self) -> bool:
        return self.redirect_to is None


PROCEED = GateDecision()


def decide(
    path: str,
    session_value: str | None,
    protected_paths: Iterable[str] = (DASHBOARD_PATH,),
    auth_only_paths: Iterable[str] = (LANDING_PATH, "/login", "/register"),
) -> GateDecision:
    """
    Pure, total function of (path, cookie) -> proceed | redirect.

    Only cookie presence counts here; whether the value maps to a real user
    is checked later by identity resolution.
    """
    is_authenticated = bool(session_value)

    # auth-only pages: exact match
    if is_authenticated and path in auth_only_paths:
        return GateDecision(redirect_to=DASHBOARD_PATH)

    # protected pages: prefix match
    if not is_authenticated and any(path.startswith(p) for p in protected_paths):
        return GateDecision(redirect_to=LANDING_PATH)

    return PROCEED
