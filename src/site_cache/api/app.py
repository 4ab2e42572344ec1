"""Development backend serving the site API contract from memory.

Used by the test suite and the demo script. Not meant for production:
there is no persistence and no authentication.
"""

from typing import Any

from fastapi import APIRouter, FastAPI, HTTPException, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from site_cache.config import settings
from site_cache.dto import (
    ConfigEntryResponse,
    ConfigUpsertRequest,
    ReorderItem,
    StatusResponse,
    validate_config_value,
)
from site_cache.exceptions import SiteCacheError

from .dependencies import StorageDep, lifespan
from .storage import SiteStorage

router = APIRouter()


@router.get("/")
async def root(storage: StorageDep) -> dict[str, Any]:
    """Root endpoint with API information."""
    return {
        "name": "Site Development API",
        "version": "0.1.0",
        "description": "In-memory site config and ordered collections",
        "resources": storage.resources,
    }


@router.get("/health")
async def health() -> dict[str, str]:
    """Health check endpoint."""
    return {"status": "healthy"}


# Config entries


@router.get("/api/config", response_model=list[ConfigEntryResponse])
async def public_configs(storage: StorageDep) -> list[dict[str, Any]]:
    """All config entries, as read by public pages."""
    return storage.list_configs()


@router.get("/api/admin/config", response_model=list[ConfigEntryResponse])
async def admin_configs(storage: StorageDep) -> list[dict[str, Any]]:
    """All config entries, as read by the dashboard."""
    return storage.list_configs()


@router.post("/api/admin/config", response_model=ConfigEntryResponse)
async def upsert_config(request: ConfigUpsertRequest, storage: StorageDep) -> dict[str, Any]:
    """Create or replace a config entry."""
    return storage.set_config(request.key, validate_config_value(request.key, request.value))


@router.delete("/api/admin/config/{key}", response_model=StatusResponse)
async def delete_config(key: str, storage: StorageDep) -> StatusResponse:
    """Delete a config entry."""
    storage.delete_config(key)
    return StatusResponse(success=True, message=f"Config '{key}' deleted")


# Ordered collections


@router.get("/api/{resource}")
async def public_items(resource: str, storage: StorageDep) -> list[dict[str, Any]]:
    """Active entities of a collection in display order."""
    return storage.list_items(resource, only_active=True)


@router.get("/api/admin/{resource}")
async def admin_items(resource: str, storage: StorageDep) -> list[dict[str, Any]]:
    """Every entity of a collection in display order."""
    return storage.list_items(resource)


@router.post("/api/admin/{resource}")
async def create_item(resource: str, payload: dict[str, Any], storage: StorageDep) -> dict[str, Any]:
    """Create an entity; the id is assigned here."""
    return storage.create_item(resource, payload)


@router.put("/api/admin/{resource}/reorder")
async def reorder_items(resource: str, items: list[ReorderItem], storage: StorageDep) -> list[dict[str, Any]]:
    """Apply new positions and answer with the authoritative collection."""
    if not items:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Reorder body must be a non-empty list of {id, order}",
        )
    return storage.reorder_items(resource, items)


@router.put("/api/admin/{resource}/{item_id}")
async def update_item(
    resource: str,
    item_id: int,
    payload: dict[str, Any],
    storage: StorageDep,
) -> dict[str, Any]:
    """Update an entity's fields."""
    return storage.update_item(resource, item_id, payload)


@router.delete("/api/admin/{resource}/{item_id}", response_model=StatusResponse)
async def delete_item(resource: str, item_id: int, storage: StorageDep) -> StatusResponse:
    """Delete an entity."""
    storage.delete_item(resource, item_id)
    return StatusResponse(success=True, message=f"{resource} {item_id} deleted")


async def handle_site_cache_error(request: Request, exc: SiteCacheError) -> JSONResponse:
    """Turn domain errors into JSON error responses."""
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.message, "code": exc.error_code, "details": exc.details},
    )


def create_app(storage: SiteStorage | None = None) -> FastAPI:
    """Build the development backend.

    Args:
        storage: Storage to serve. If None, starts empty.

    Returns:
        The FastAPI application
    """
    app = FastAPI(
        title="Site Development API",
        description="In-memory backend for the site config and ordered collections",
        version="0.1.0",
        lifespan=lifespan,
    )
    app.state.storage = storage or SiteStorage()

    app.add_middleware(
        CORSMiddleware,  # type: ignore[arg-type]
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_exception_handler(SiteCacheError, handle_site_cache_error)  # type: ignore[arg-type]
    app.include_router(router)
    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "site_cache.api.app:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.api_reload,
    )
