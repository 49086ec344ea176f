"""Application configuration from environment."""
from functools import lru_cache
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """App settings loaded from env / .env."""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    app_name: str = "Healthcare Dashboard"
    debug: bool = False
    environment: str = "development"  # development | production
    log_level: str = "INFO"

    # Database
    database_url: str = "sqlite+aiosqlite:///./data/sqlite.db"
    seed_demo_users: bool = False

    # Used only when sign_session_cookie is on
    secret_key: str = "change-me-in-production-use-env"

    # Session cookie (logged-in users)
    session_cookie_name: str = "session"
    session_cookie_max_age: int = 60 * 60 * 24 * 7  # 7 days
    sign_session_cookie: bool = False

    # Passwords
    bcrypt_rounds: int = 12
    password_min_length: int = 6
    password_max_length: int = 100

    # Route classes for the access gate
    protected_paths: list[str] = ["/dashboard"]
    auth_only_paths: list[str] = ["/", "/login", "/register"]

    @property
    def is_production(self) -> bool:
        return self.environment == "production"


@lru_cache
def get_settings() -> Settings:
    return Settings()


# Package dir (templates/static live under app/)
APP_DIR = Path(__file__).resolve().parent.parent
