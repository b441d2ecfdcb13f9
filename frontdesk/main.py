"""FastAPI application - main entry point."""

import structlog
from contextlib import asynccontextmanager

from fastapi import FastAPI

from frontdesk.config import get_settings
from frontdesk.core.logging import configure_logging
from frontdesk.core.middleware import setup_middleware
from frontdesk.core.exceptions import setup_exception_handlers
from frontdesk.infrastructure.store import get_store
from frontdesk.infrastructure.repositories.user_repository import InMemoryUserRepository

# Import routers
from frontdesk.interfaces.api.auth import router as auth_router
from frontdesk.interfaces.api.rooms import router as rooms_router
from frontdesk.interfaces.api.guests import router as guests_router
from frontdesk.interfaces.api.dashboard import router as dashboard_router
from frontdesk.interfaces.api.reports import router as reports_router

settings = get_settings()

# Configure logging immediately
configure_logging()
logger = structlog.get_logger(__name__)


def _startup_tasks() -> None:
    """Ensure the default front desk account exists (dev only)."""
    from frontdesk.application.services.auth_service import ensure_default_user

    if settings.CREATE_DEFAULT_USER:
        ensure_default_user(InMemoryUserRepository(get_store()))


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan - startup and shutdown events."""
    logger.info("Starting front desk service...", env=settings.ENVIRONMENT)
    _startup_tasks()
    logger.info("Room inventory loaded", rooms=len(get_store().rooms))

    yield

    logger.info("Front desk service stopped")


app = FastAPI(
    title="Hotel Front Desk",
    description="API Backend - guest check-in, room status, dashboard and reports",
    version="1.0.0",
    lifespan=lifespan,
)

setup_middleware(app)
setup_exception_handlers(app)

app.include_router(auth_router)
app.include_router(rooms_router)
app.include_router(guests_router)
app.include_router(dashboard_router)
app.include_router(reports_router)


@app.get("/")
def root():
    return {
        "name": "Hotel Front Desk",
        "version": "1.0.0",
        "status": "running",
        "docs": "/docs",
    }


@app.get("/health")
def health():
    return {"status": "healthy"}
