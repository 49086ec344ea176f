"""Input checks run before any credential is touched."""
import re

from app.core.config import get_settings
from app.core.exceptions import ValidationError

# Simple, practical email check: local@domain.tld, no spaces
EMAIL_RE = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")


def normalize_email(email: str | None) -> str:
    return (email or "").strip().lower()


def validate_email(email: str | None) -> str:
    """Return the normalized email or raise ValidationError."""
    email_norm = normalize_email(email)
    if not email_norm or not EMAIL_RE.match(email_norm):
        raise ValidationError("Invalid email format")
    return email_norm


def validate_password(password: str | None) -> str:
    settings = get_settings()
    pwd = password or ""
    if len(pwd) < settings.password_min_length:
        raise ValidationError(f"Password must be at least {settings.password_min_length} characters long")
    if len(pwd) > settings.password_max_length:
        raise ValidationError(f"Password must be no more than {settings.password_max_length} characters long")
    # bcrypt cannot hash NUL bytes
    if "\x00" in pwd:
        raise ValidationError("Password must not contain NUL characters")
    return pwd
