"""Main application entrypoint for the Learnio upload service."""

import logging
from pathlib import Path

import uvicorn
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from learnio.api.middleware import HTTPErrorLoggingMiddleware
from learnio.api.routes_root import router as root_router
from learnio.api.routes_upload import router as upload_router
from learnio.core.config import Settings
from learnio.core.logging import setup_logging
from learnio.services.upload import UploadService
from learnio.storage.local import LocalBlobStore

logger = logging.getLogger(__name__)


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Render HTTP errors as ``{"message": ...}`` bodies."""
    return JSONResponse(
        status_code=exc.status_code,
        content={"message": exc.detail},
        headers=getattr(exc, "headers", None),
    )


def create_app(settings: Settings | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        settings: Explicit settings; defaults to the environment-loaded singleton

    Returns:
        FastAPI: Configured FastAPI application instance
    """
    if settings is None:
        from learnio.core.config import settings

    setup_logging(settings)

    upload_dir = Path(settings.UPLOAD_DIR)
    if settings.CREATE_UPLOAD_DIR:
        upload_dir.mkdir(parents=True, exist_ok=True)

    app = FastAPI(
        title=settings.SERVICE_NAME,
        version=settings.SERVICE_VERSION,
    )

    app.state.settings = settings
    app.state.upload_field_name = settings.UPLOAD_FIELD_NAME
    app.state.upload_service = UploadService(
        store=LocalBlobStore(upload_dir),
        public_prefix=settings.PUBLIC_PATH_PREFIX,
        max_name_attempts=settings.MAX_NAME_ATTEMPTS,
        chunk_size=settings.UPLOAD_CHUNK_SIZE,
    )

    app.add_middleware(HTTPErrorLoggingMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=settings.cors_methods,
        allow_headers=settings.cors_headers,
    )
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)

    # Register routers
    app.include_router(upload_router)
    app.include_router(root_router)

    logger.info(
        "Application configured",
        extra={"upload_dir": str(upload_dir), "cors_origins": settings.cors_origins},
    )
    return app


def run() -> None:
    """Serve the application with uvicorn."""
    from learnio.core.config import settings

    app = create_app(settings)
    logger.info(f"server is running on port : {settings.PORT}")
    uvicorn.run(app, host=settings.HOST, port=settings.PORT, log_config=None)


if __name__ == "__main__":
    run()
