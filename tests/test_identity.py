"""Tests for the request-scoped identity cache state machine."""
import pytest

from app.schemas.auth import UserPublicSchema
from app.services.identity import IdentityCache, IdentityState


@pytest.fixture
def user() -> UserPublicSchema:
    return UserPublicSchema(id=1, email="a@x.com")


def test_starts_unknown() -> None:
    identity = IdentityCache()
    assert identity.state is IdentityState.UNKNOWN
    assert identity.is_loading
    assert not identity.is_authenticated
    assert identity.user is None


def test_resolved(user: UserPublicSchema) -> None:
    identity = IdentityCache()
    identity.resolved(user)
    assert identity.state is IdentityState.AUTHENTICATED
    assert identity.user == user


def test_resolve_failed() -> None:
    identity = IdentityCache()
    identity.resolve_failed()
    assert identity.state is IdentityState.ANONYMOUS
    assert identity.user is None


def test_late_resolution_does_not_override_logout(user: UserPublicSchema) -> None:
    """A lookup finishing after an explicit logout must not log the user back in."""
    identity = IdentityCache()
    identity.logged_out()
    identity.resolved(user)
    assert identity.state is IdentityState.ANONYMOUS


def test_late_failure_does_not_override_login(user: UserPublicSchema) -> None:
    identity = IdentityCache()
    identity.logged_in(user)
    identity.resolve_failed()
    assert identity.is_authenticated


def test_login_then_logout(user: UserPublicSchema) -> None:
    identity = IdentityCache()
    identity.resolve_failed()
    identity.logged_in(user)
    assert identity.user == user
    identity.logged_out()
    assert identity.state is IdentityState.ANONYMOUS
    assert identity.user is None


def test_only_public_users_are_held() -> None:
    identity = IdentityCache()
    with pytest.raises(TypeError):
        identity.logged_in({"id": 1, "email": "a@x.com", "password_hash": "x"})
