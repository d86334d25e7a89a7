from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.middleware.cors import CORSMiddleware
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from sqlalchemy.engine import Engine
from typing import Optional
import logging
import traceback
from wildcards.core.config import Settings, settings as default_settings
from wildcards.core.database import create_db_engine, init_db
from wildcards.core.exceptions import (
    WildcardsException,
    ValidationError,
    NotFoundError,
    ConflictError,
    StorageError,
)
from wildcards.utils.assets_utils import ensure_upload_directory

# Import API router
from wildcards.api.v1 import api_router

logger = logging.getLogger(__name__)


def _register_exception_handlers(app: FastAPI, settings: Settings) -> None:
    # Malformed bodies are reported as 400 like missing fields, not 422
    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        """Log validation errors with full details for debugging."""
        logger.warning(f"Validation error on {request.method} {request.url.path}")
        logger.warning(f"Request body: {exc.body if exc.body is not None else 'empty'}")
        logger.warning(f"Validation errors: {exc.errors()}")
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"detail": jsonable_encoder(exc.errors()), "type": "ValidationError"},
        )

    @app.exception_handler(WildcardsException)
    async def wildcards_exception_handler(request: Request, exc: WildcardsException):
        """Handle custom application exceptions."""
        if isinstance(exc, ValidationError):
            status_code = status.HTTP_400_BAD_REQUEST
        elif isinstance(exc, NotFoundError):
            status_code = status.HTTP_404_NOT_FOUND
        elif isinstance(exc, ConflictError):
            status_code = status.HTTP_409_CONFLICT
        else:
            # StorageError: details were logged where it was raised
            status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

        if not isinstance(exc, StorageError):
            logger.warning(f"Application exception on {request.method} {request.url.path}: {type(exc).__name__}: {str(exc)}")
        return JSONResponse(
            status_code=status_code,
            content={"detail": str(exc), "type": type(exc).__name__},
        )

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        """Catch all unhandled exceptions and answer with a generic 500."""
        logger.error(f"Unhandled exception on {request.method} {request.url.path}", exc_info=exc)

        # In development, show full error details
        if settings.is_development:
            return JSONResponse(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                content={
                    "detail": str(exc),
                    "type": type(exc).__name__,
                    "traceback": "".join(traceback.format_exception(type(exc), exc, exc.__traceback__)),
                },
            )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={
                "detail": "An internal server error occurred. Please try again later.",
                "type": "InternalServerError"
            },
        )


def create_app(settings: Optional[Settings] = None, engine: Optional[Engine] = None) -> FastAPI:
    """
    Build the application and the resources it owns.

    Args:
        settings: Settings to run with (defaults to the environment)
        engine: Existing connection pool to use instead of building one

    Returns:
        The configured FastAPI application
    """
    settings = settings or default_settings
    logging.basicConfig(
        level=settings.log_level.upper(),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    )

    app = FastAPI(title="Wildcards API", version="1.0.0")
    app.state.settings = settings
    app.state.engine = engine or create_db_engine(settings)

    _register_exception_handlers(app, settings)

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.on_event("startup")
    def startup_event():
        """Initialize database on startup."""
        init_db(app.state.engine)

    @app.on_event("shutdown")
    def shutdown_event():
        """Close every pooled connection."""
        app.state.engine.dispose()

    @app.get("/")
    async def root():
        return {
            "message": "Wildcards API",
            "status": "running",
            "docs": {
                "swagger": "/docs",
                "redoc": "/redoc"
            }
        }

    @app.get("/health")
    async def health():
        return {"status": "healthy"}

    # Include API router
    app.include_router(api_router, prefix=settings.api_prefix)

    # Serve uploaded artwork at the URLs POST /upload hands out
    upload_dir = ensure_upload_directory(settings)
    logger.info(f"Mounting uploads from: {upload_dir}")
    app.mount(settings.upload_url_prefix, StaticFiles(directory=str(upload_dir)), name="uploads")

    return app


def run() -> None:
    """Serve the application with uvicorn."""
    import uvicorn

    uvicorn.run(
        "wildcards.main:create_app",
        factory=True,
        host=default_settings.host,
        port=default_settings.port,
        reload=default_settings.is_development,
    )


if __name__ == "__main__":
    run()
