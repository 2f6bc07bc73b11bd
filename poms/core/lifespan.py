"""Application lifespan: startup and shutdown.

Owns the lifecycle of the process-wide database engine: created at startup
(it is also created lazily on first use), disposed at shutdown.
"""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from poms.infrastructure.persistence import database

logger = logging.getLogger(__name__)


@asynccontextmanager
async def create_lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Initialize the engine, yield, then dispose it."""
    database.init_engine()
    logger.info("Startup complete")

    yield

    await database.dispose_engine()
    logger.info("Shutdown complete")
