# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from src.config import settings
from src.database import SessionLocal, init_db
from src.events import event_bus
from src.services import group_sync_service

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler for startup and shutdown events."""
    init_db()

    logger.info("Registering group permission handlers...")
    group_sync_service.register_group_sync_handlers(event_bus, SessionLocal)

    if settings.seed_default_roles:
        db = SessionLocal()
        try:
            created = group_sync_service.seed_default_roles(db)
            logger.info(f"Seeded {len(created)} default roles")
        finally:
            db.close()

    yield

    logger.info("Unregistering group permission handlers...")
    event_bus.unsubscribe_all(group_sync_service.SUBSCRIBER_ID)


app = FastAPI(
    title="Group Permission Sync",
    description="Keeps group permissions and the role registry consistent",
    version="0.1.0",
    lifespan=lifespan,
)


@app.get("/health")
def health_check() -> dict:
    """Health check endpoint."""
    return {"status": "healthy"}


# Import and include API router after it's created
from src.api.v1.router import api_router  # noqa: E402

app.include_router(api_router, prefix="/api/v1")
