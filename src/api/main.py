"""Main FastAPI application entry point."""

from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI

from infrastructure.database.dependencies import (
    close_database_connections,
    create_schema,
)
from infrastructure.dependencies import get_message_publisher, get_outbox_publisher
from infrastructure.logging import configure_logging
from infrastructure.settings import (
    get_database_settings,
    get_outbox_settings,
    get_settings,
)
from infrastructure.version import __version__
from projects.presentation import router as projects_router
from shared_kernel.middleware import install_validation_error_handler
from users.presentation import router as users_router

# Register every ORM model on Base.metadata before create_all runs
import infrastructure.outbox.models  # noqa: F401
import projects.infrastructure.models  # noqa: F401
import users.infrastructure.models  # noqa: F401

logger = structlog.get_logger()


@asynccontextmanager
async def outbox_publishing(app: FastAPI):
    """Run the outbox publisher for the lifetime of the app, if enabled."""
    if not get_outbox_settings().enabled:
        logger.info("outbox_publisher_disabled")
        yield
        return

    publisher = get_outbox_publisher()
    await publisher.start()
    try:
        yield
    finally:
        await publisher.stop()
        await get_message_publisher().close()
        # The next lifespan builds its publishers against a fresh engine
        get_outbox_publisher.cache_clear()
        get_message_publisher.cache_clear()


@asynccontextmanager
async def benjamin_lifespan(app: FastAPI):
    """Application lifespan context.

    Manages:
    - Logging configuration
    - Optional schema creation for development databases
    - Outbox publisher start and stop
    - Database engine disposal on shutdown
    """
    configure_logging(debug=get_settings().debug)

    if get_database_settings().create_schema:
        await create_schema()

    try:
        async with outbox_publishing(app):
            yield
    finally:
        await close_database_connections()


app = FastAPI(
    title="Benjamin API",
    description="Projects, tasks and collaborators with email invitations",
    version=__version__,
    lifespan=benjamin_lifespan,
)

install_validation_error_handler(app)

app.include_router(users_router)
app.include_router(projects_router)


@app.get("/health")
def health():
    """Basic health check endpoint."""
    return {"status": "ok"}
