"""
Glass Inventory - Main Application
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from .config import settings
from .db import (
    DuplicateError, InvalidRecordError, InventoryError, NotFoundError, StorageError
)
from .dependencies import init_dependencies, close_dependencies
from .logging_setup import configure_logging
from .routes import brands_router, models_router, windshields_router

# Configure logging
configure_logging(settings.log_level, settings.log_file)

logger = logging.getLogger(__name__)

ERROR_STATUS = {
    DuplicateError: 409,
    InvalidRecordError: 422,
    NotFoundError: 404,
    StorageError: 500,
}


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan - startup and shutdown."""
    logger.info("Starting Glass Inventory...")
    await init_dependencies()
    logger.info("Application ready")
    yield
    logger.info("Shutting down...")
    await close_dependencies()


# Create app
app = FastAPI(
    title="Glass Inventory",
    description="Stock of windshield and window glass per vehicle brand and model",
    version="1.0.0",
    lifespan=lifespan
)

# Include routers
app.include_router(brands_router)
app.include_router(models_router)
app.include_router(windshields_router)


@app.exception_handler(InventoryError)
async def inventory_error_handler(request: Request, exc: InventoryError):
    """Translate store errors into JSON responses."""
    status_code = ERROR_STATUS.get(type(exc), 500)
    if status_code >= 500:
        logger.error(f"{request.method} {request.url.path} failed: {exc}")
    return JSONResponse(status_code=status_code, content={"detail": str(exc)})


@app.get("/health")
async def health():
    """Health check endpoint."""
    return {"status": "ok"}


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "glass_inventory.main:app",
        host=settings.host,
        port=settings.port,
        reload=True
    )
