"""Request-scoped identity cache consumed by the navbar and dashboard."""
from enum import Enum

from app.schemas.auth import UserPublicSchema


class IdentityState(str, Enum):
    UNKNOWN = "unknown"
    AUTHENTICATED = "authenticated"
    ANONYMOUS = "anonymous"


class IdentityCache:
    """
    Who is logged in, as seen by the current request.

    Starts UNKNOWN. resolved/resolve_failed settle the initial lookup;
    logged_in/logged_out apply from any state.
    """

    def __init__(self):
        self.state = IdentityState.UNKNOWN
        self.user: UserPublicSchema | None = None

    @property
    def is_authenticated(self) -> bool:
        return self.state is IdentityState.AUTHENTICATED

    @property
    def is_loading(self) -> bool:
        return self.state is IdentityState.UNKNOWN

    def resolved(self, user: UserPublicSchema) -> None:
        if self.state is IdentityState.UNKNOWN:
            self._authenticate(user)

    def resolve_failed(self) -> None:
        if self.state is IdentityState.UNKNOWN:
            self._clear()

    def logged_in(self, user: UserPublicSchema) -> None:
        self._authenticate(user)

    def logged_out(self) -> None:
        self._clear()

    def _authenticate(self, user: UserPublicSchema) -> None:
        if not isinstance(user, UserPublicSchema):
            raise TypeError("IdentityCache only holds UserPublicSchema")
        self.state = IdentityState.AUTHENTICATED
        self.user = user

    def _clear(self) -> None:
        self.state = IdentityState.ANONYMOUS
        self.user = None

    def __repr__(self):
        return f"<IdentityCache {self.state.value}>"
