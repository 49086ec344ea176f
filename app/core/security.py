"""Password hashing and session cookie values (plain user id or signed token)."""
import base64
import hashlib
import hmac
import time
from functools import lru_cache

from passlib.context import CryptContext

from app.core.config import get_settings


@lru_cache
def _pwd_context(rounds: int) -> CryptContext:
    return CryptContext(schemes=["bcrypt"], deprecated="auto", bcrypt__rounds=rounds)


def hash_password(password: str) -> str:
    """Salted bcrypt hash; a fresh salt is generated on every call."""
    return _pwd_context(get_settings().bcrypt_rounds).hash(password)


def verify_password(plain: str, hashed: str) -> bool:
    return _pwd_context(get_settings().bcrypt_rounds).verify(plain, hashed)


# bcrypt ignores everything past this many bytes of the password
BCRYPT_MAX_BYTES = 72

# SQLite INTEGER upper bound; larger ids cannot reach the store
MAX_USER_ID = 2**63 - 1


# Signed token: base64(user_id:timestamp).hmac
def _signature(payload: bytes) -> str:
    key = get_settings().secret_key.encode("utf-8")
    return hmac.new(key, payload, hashlib.sha256).hexdigest()


def create_session_token(user_id: int) -> str:
    """Create a signed session token for the user."""
    payload = f"{user_id}:{int(time.time())}".encode("utf-8")
    return base64.urlsafe_b64encode(payload).decode("ascii").rstrip("=") + "." + _signature(payload)


def verify_session_token(token: str) -> int | None:
    """Verify signed token and return user_id if valid; None otherwise."""
    if not token or "." not in token:
        return None
    try:
        encoded, sig = token.rsplit(".", 1)
        pad = 4 - len(encoded) % 4
        if pad != 4:
            encoded += "=" * pad
        payload = base64.urlsafe_b64decode(encoded)
        if not hmac.compare_digest(_signature(payload), sig):
            return None
        user_id, ts = (int(part) for part in payload.decode("utf-8").split(":", 1))
    except (ValueError, UnicodeDecodeError):
        return None
    if abs(time.time() - ts) > get_settings().session_cookie_max_age:
        return None
    return user_id


def encode_session_value(user_id: int) -> str:
    """Cookie value for a logged-in user: decimal id, or a signed token when enabled."""
    if get_settings().sign_session_cookie:
        return create_session_token(user_id)
    return str(user_id)


def _as_user_id(user_id: int) -> int | None:
    return user_id if 0 < user_id <= MAX_USER_ID else None


def decode_session_value(value: str | None) -> int | None:
    """Map a cookie value back to a user id. Empty or malformed values give None."""
    if not value:
        return None
    if get_settings().sign_session_cookie:
        user_id = verify_session_token(value)
        return None if user_id is None else _as_user_id(user_id)
    # str.isdigit alone accepts non-ASCII digits such as "²"
    if not (value.isascii() and value.isdigit()):
        return None
    return _as_user_id(int(value))
