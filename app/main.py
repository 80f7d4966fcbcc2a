"""Task Board API - Main Application Module.

This module initializes the FastAPI application with proper configuration,
middleware, routing, and lifecycle management for the task board backend.
"""

import logging
import sys
import time
import uuid
from contextlib import asynccontextmanager
from datetime import datetime, timezone
from pathlib import Path

# Add the project root to Python path if running directly
if __name__ == "__main__":
    project_root = Path(__file__).parent.parent
    sys.path.insert(0, str(project_root))

from fastapi import FastAPI, Request, Response
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.core.config import ConfigValidator, settings
from app.core.logging import setup_logging
from app.database import AsyncSessionLocal, engine
from models import Base

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(_app: FastAPI):
    """Manage application lifecycle events."""
    setup_logging(settings)
    logger.info("🚀 Starting %s (%s)", settings.app_name, settings.environment.value)
    ConfigValidator.validate_required_settings()

    # Development and testing: auto-create tables if they don't exist
    if settings.creates_schema_on_startup:
        logger.info("📝 Creating/updating database tables...")
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
        logger.info("✅ Database tables created/verified")
    else:
        logger.info("🏭 Expecting the database schema to be provisioned already")

    yield

    logger.info("🛑 Shutting down %s...", settings.app_name)
    await engine.dispose()
    logger.info("✅ Database connections closed")


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    app = FastAPI(
        title=settings.app_name,
        description="Task management with lists, cards, projects, notes and time tracking",
        version=settings.version,
        lifespan=lifespan,
        docs_url="/docs" if settings.is_development else None,
        redoc_url="/redoc" if settings.is_development else None,
    )

    # Add middleware
    setup_middleware(app)

    # Add exception handlers
    setup_exception_handlers(app)

    # Include routers
    setup_routers(app)

    return app


def setup_middleware(app: FastAPI):
    """Configure application middleware."""
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Request ID and access log middleware
    @app.middleware("http")
    async def add_request_id(request: Request, call_next):
        request_id = str(uuid.uuid4())
        request.state.request_id = request_id
        started = time.perf_counter()
        response = await call_next(request)
        elapsed_ms = (time.perf_counter() - started) * 1000
        response.headers["X-Request-ID"] = request_id
        logger.info(
            "%s %s -> %s (%.1f ms)",
            request.method,
            request.url.path,
            response.status_code,
            elapsed_ms,
            extra={"request_id": request_id},
        )
        return response


def _error_body(request: Request, message: str, error_code: str, details) -> dict:
    return {
        "status": "error",
        "error": message,
        "message": message,
        "error_code": error_code,
        "details": details,
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "request_id": getattr(request.state, "request_id", None),
    }


def setup_exception_handlers(app: FastAPI):
    """Configure global exception handlers."""

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        # 304 responses must not carry a body
        if exc.status_code == 304:
            return Response(status_code=304)

        # Handle custom exceptions that have structured detail
        if isinstance(exc.detail, dict) and "message" in exc.detail:
            message = exc.detail["message"]
            error_code = exc.detail.get("error_code", "HTTP_ERROR")
            details = exc.detail.get("details")
        else:
            message = str(exc.detail) if exc.detail else "An error occurred"
            error_code = "HTTP_ERROR"
            details = None

        return JSONResponse(
            status_code=exc.status_code,
            content=_error_body(request, message, error_code, details),
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        # Convert errors to JSON-serializable format
        errors = []
        for error in exc.errors():
            error_dict = {
                "loc": list(error.get("loc", [])),
                "msg": str(error.get("msg", "Validation error")),
                "type": error.get("type", "value_error"),
            }
            if "input" in error:
                error_dict["input"] = str(error["input"])
            errors.append(error_dict)

        message = "; ".join(
            f"{'.'.join(str(part) for part in e['loc'][1:]) or e['loc'][0]}: {e['msg']}"
            for e in errors
        ) or "Validation error"

        return JSONResponse(
            status_code=400,
            content=_error_body(request, message, "VALIDATION_ERROR", errors),
        )


def setup_routers(app: FastAPI):
    """Configure application routers."""
    # Import routers
    from app.domains.card.controller import router as card_router
    from app.domains.list.controller import router as list_router
    from app.domains.note.controller import router as note_router
    from app.domains.project.controller import router as project_router
    from app.domains.user.controller import login_router
    from app.domains.user.controller import router as user_router

    @app.get("/health")
    async def health_check():
        """Health check endpoint with a database round trip."""
        try:
            async with AsyncSessionLocal() as db:
                await db.execute(text("SELECT 1"))
        except SQLAlchemyError as e:
            logger.error("Health check failed: %s", e)
            return JSONResponse(
                status_code=503,
                content={
                    "status": "unhealthy",
                    "message": "Database unavailable",
                    "timestamp": datetime.now(timezone.utc).isoformat(),
                },
            )

        return {
            "status": "healthy",
            "version": settings.version,
            "environment": settings.environment,
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "services": {"database": "healthy"},
        }

    @app.get("/")
    async def root():
        """Root endpoint with API information."""
        return {
            "name": settings.app_name,
            "version": settings.version,
            "description": "Task management with lists, cards, projects and notes",
            "docs_url": "/docs" if settings.is_development else None,
        }

    # Include domain routers
    app.include_router(user_router)
    app.include_router(login_router)
    app.include_router(list_router)
    app.include_router(card_router)
    app.include_router(project_router)
    app.include_router(note_router)


# Create the application instance
app = create_app()


def main():
    """Entry point for running the application directly."""
    import uvicorn

    uvicorn.run(
        "app.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.is_development,
        log_level=settings.log_level.value.lower(),
    )


if __name__ == "__main__":
    main()
