"""Tests for email and password validation."""
import pytest

from app.core.exceptions import ValidationError
from app.services.validation import normalize_email, validate_email, validate_password


@pytest.mark.parametrize(
    "email",
    ["a@x.com", "first.last@example.co.uk", "user+tag@sub.domain.org"],
)
def test_valid_emails_pass(email: str) -> None:
    assert validate_email(email) == email


@pytest.mark.parametrize(
    "email",
    ["", None, "plainaddress", "missing-at.com", "a@b", "a b@x.com", "@x.com", "a@x."],
)
def test_invalid_emails_rejected(email: str | None) -> None:
    with pytest.raises(ValidationError) as exc_info:
        validate_email(email)
    assert exc_info.value.message == "Invalid email format"


def test_email_is_normalized() -> None:
    """Emails are trimmed and lower-cased so uniqueness is case-insensitive."""
    assert validate_email("  Alice@Example.COM ") == "alice@example.com"
    assert normalize_email(None) == ""


def test_password_length_bounds() -> None:
    assert validate_password("a" * 6) == "a" * 6
    assert validate_password("a" * 100) == "a" * 100


def test_password_too_short() -> None:
    with pytest.raises(ValidationError) as exc_info:
        validate_password("12345")
    assert exc_info.value.message == "Password must be at least 6 characters long"


def test_password_too_long() -> None:
    with pytest.raises(ValidationError) as exc_info:
        validate_password("a" * 101)
    assert exc_info.value.message == "Password must be no more than 100 characters long"


def test_missing_password_rejected() -> None:
    with pytest.raises(ValidationError):
        validate_password(None)


def test_password_minimum_follows_settings(monkeypatch: pytest.MonkeyPatch) -> None:
    from app.core.config import get_settings

    monkeypatch.setenv("PASSWORD_MIN_LENGTH", "8")
    get_settings.cache_clear()

    with pytest.raises(ValidationError) as exc_info:
        validate_password("secret1")
    assert exc_info.value.message == "Password must be at least 8 characters long"


def test_password_with_nul_rejected() -> None:
    with pytest.raises(ValidationError) as exc_info:
        validate_password("secret\x00x")
    assert exc_info.value.message == "Password must not contain NUL characters"
