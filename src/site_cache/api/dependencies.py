"""Dependency injection configuration for the development backend.

Uses FastAPI's app.state pattern for storing the storage instance.

Pattern:
    - Storage stored in app.state by create_app()
    - Dependency functions retrieve from request.app.state
"""

from contextlib import asynccontextmanager
from typing import Annotated

from fastapi import Depends, FastAPI, Request

from site_cache.logging import get_logger, setup_logging

from .storage import SiteStorage

logger = get_logger(__name__)


def get_storage(request: Request) -> SiteStorage:
    """Dependency injection for SiteStorage from app.state.

    Args:
        request: FastAPI Request object

    Returns:
        The SiteStorage instance from app.state

    Raises:
        RuntimeError: If storage is not initialized
    """
    storage = getattr(request.app.state, "storage", None)
    if storage is None:
        raise RuntimeError("SiteStorage not initialized. Use create_app().")
    return storage


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifespan context manager for the development backend."""
    setup_logging()
    logger.info("Starting site development API")
    logger.info("Resources: %s", ", ".join(app.state.storage.resources))

    yield

    logger.info("Shutting down site development API")


# Type alias for cleaner dependency injection
StorageDep = Annotated[SiteStorage, Depends(get_storage)]
