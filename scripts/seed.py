"""Insert the demo users into the configured database (existing rows are skipped).

Usage: python -m scripts.seed
"""
import asyncio

from app.core.logging import configure_logging
from app.db.base import Base
from app.db.session import AsyncSessionLocal, engine
from app.services.seeding import seed_users


async def main() -> None:
    configure_logging()
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    async with AsyncSessionLocal() as db:
        await seed_users(db)
    await engine.dispose()


if __name__ == "__main__":
    asyncio.run(main())
