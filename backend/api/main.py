"""
QML Script IntelliSense API Main Application.

FastAPI application with CORS, error handling, and lifecycle management.
Requires Python 3.11+.
"""

from contextlib import asynccontextmanager
from typing import Any, AsyncIterator

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from api.dependencies import get_session, set_session
from utils.config import get_settings
from utils.logger import configure_logging, get_logger
from workspace.session import IntellisenseSession


# Initialize logging
configure_logging()
logger = get_logger("api")


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """
    Application lifespan manager.

    Owns the workspace session for the life of the process.
    """
    settings = get_settings()
    logger.info(
        "starting_application",
        app_name=settings.app_name,
        version=settings.app_version,
        workspace=str(settings.workspace.root) if settings.workspace.root else None,
    )

    session = IntellisenseSession(settings=settings)
    try:
        session.start()
    except OSError as e:
        # Serve requests without invalidation rather than not at all
        logger.error("watcher_start_failed", error=str(e))
    set_session(session)

    yield

    logger.info("shutting_down_application")
    current = get_session()
    if current is not None:
        current.close()
    set_session(None)


def create_app() -> FastAPI:
    """
    Create and configure the FastAPI application.

    Returns:
        Configured FastAPI instance
    """
    settings = get_settings()

    application = FastAPI(
        title=settings.app_name,
        description="QML to JavaScript symbol resolution for editors",
        version=settings.app_version,
        lifespan=lifespan,
        docs_url="/docs" if settings.is_development else None,
        redoc_url="/redoc" if settings.is_development else None,
    )

    application.add_middleware(
        CORSMiddleware,
        allow_origins=settings.api.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @application.exception_handler(Exception)
    async def global_exception_handler(
        request: Request, exc: Exception
    ) -> JSONResponse:
        logger.exception(
            "unhandled_exception",
            path=request.url.path,
            method=request.method,
            error=str(exc),
        )
        return JSONResponse(
            status_code=500,
            content={
                "error": "Internal server error",
                "message": str(exc) if settings.is_development else "An unexpected error occurred",
            },
        )

    @application.get("/health")
    async def health_check() -> dict[str, Any]:
        """Health check endpoint."""
        session = get_session()
        return {
            "status": "healthy",
            "version": settings.app_version,
            "session": "active" if session else "inactive",
        }

    # Import and include routers here to avoid circular imports
    from api.routes import analysis, cache, editor

    application.include_router(editor.router, tags=["Editor"])
    application.include_router(analysis.router, prefix="/analyze", tags=["Analysis"])
    application.include_router(cache.router, prefix="/cache", tags=["Cache"])

    return application


# Create the application instance
app = create_app()
