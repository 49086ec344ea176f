"""Demo users for local development (insert-or-ignore)."""
import structlog
from sqlalchemy.ext.asyncio import AsyncSession
from starlette.concurrency import run_in_threadpool

from app.core.exceptions import ConflictError
from app.core.security import hash_password
from app.services.user_store import UserStore
from app.services.validation import normalize_email

logger = structlog.get_logger(__name__)

DEMO_PASSWORD = "harsha"
DEMO_EMAILS = [f"user{i}@example.com" for i in range(1, 6)]


async def seed_users(db: AsyncSession, emails: list[str] = DEMO_EMAILS, password: str = DEMO_PASSWORD) -> int:
    """Create missing demo users; returns how many were inserted."""
    store = UserStore(db)
    password_hash = await run_in_threadpool(hash_password, password)
    inserted = 0
    for email in map(normalize_email, emails):
        if await store.get_by_email(email):
            logger.debug("Seed user exists", email=email)
            continue
        try:
            await store.create(email, password_hash)
        except ConflictError:
            continue
        inserted += 1
    logger.info("Seeded demo users", inserted=inserted, total=len(emails))
    return inserted
