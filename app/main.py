"""Healthcare Dashboard - FastAPI app entry point."""
from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles

from app.core.config import APP_DIR, get_settings
from app.core.exceptions import global_exception_handler
from app.core.logging import configure_logging
from app.core.middleware import setup_middleware
from app.db.base import Base
from app.db.session import engine, AsyncSessionLocal
from app.routers import auth, web
from app.services.seeding import seed_users

settings = get_settings()

configure_logging()
logger = structlog.get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("Starting", app=settings.app_name, env=settings.environment)

    # create tables (use Alembic for real deployments)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    if settings.seed_demo_users:
        async with AsyncSessionLocal() as db:
            await seed_users(db)

    yield

    await engine.dispose()
    logger.info("Stopped")


app = FastAPI(
    title=settings.app_name,
    description="Healthcare dashboard with email/password accounts",
    debug=settings.debug,
    lifespan=lifespan,
)

setup_middleware(app)
app.add_exception_handler(Exception, global_exception_handler)

app.mount("/static", StaticFiles(directory=str(APP_DIR / "static")), name="static")

app.include_router(web.router)
app.include_router(auth.router)


@app.get("/health")
async def health():
    return {"status": "ok"}
