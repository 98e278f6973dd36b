# Main application entry point
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from . import __version__
from .api import auth_router, health_router, notes_router, tenants_router
from .config import Settings, get_settings
from .core.exceptions import AppError, ValidationFailedError
from .core.logging import LoggingMiddleware, get_logger, setup_logging
from .core.schemas.common import LivenessResponse
from .database import create_engine, create_session_factory, create_tables
from .seed import seed_demo_data

logger = get_logger("main")


def _validation_details(exc: RequestValidationError) -> list[dict]:
    details = []
    for err in exc.errors():
        loc = [str(part) for part in err.get("loc", ()) if part not in ("body", "query", "path")]
        message = str(err.get("msg", ""))
        # pydantic prefixes messages raised from field validators
        if message.startswith("Value error, "):
            message = message[len("Value error, "):]
        details.append({"field": ".".join(loc), "message": message})
    return details


def register_exception_handlers(app: FastAPI, settings: Settings) -> None:
    """Translate errors into the JSON bodies clients rely on."""

    @app.exception_handler(AppError)
    async def app_error_handler(request: Request, exc: AppError):
        return JSONResponse(status_code=exc.status_code, content=exc.to_dict(), headers=exc.headers)

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        details = _validation_details(exc)
        error = ValidationFailedError(
            message=details[0]["message"] if details else None,
            details=details,
        )
        return JSONResponse(status_code=error.status_code, content=error.to_dict())

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        if exc.status_code == status.HTTP_404_NOT_FOUND:
            content = {"error": "Route not found"}
        else:
            content = {"error": exc.detail}
        return JSONResponse(status_code=exc.status_code, content=content, headers=exc.headers)

    @app.exception_handler(Exception)
    async def unhandled_error_handler(request: Request, exc: Exception):
        logger.exception(
            "Unhandled error",
            extra={"method": request.method, "path": request.url.path},
        )
        message = str(exc) if settings.is_development else "Internal server error"
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": "Something went wrong!", "message": message},
        )


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Build the application around an explicit Settings object."""
    app_settings = settings or get_settings()
    setup_logging(app_settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Application lifespan events."""
        logger.info(
            "Starting TenantNotes application",
            extra={
                "version": __version__,
                "environment": app_settings.environment,
                "debug": app_settings.debug,
            },
        )

        engine = create_engine(app_settings)
        app.state.engine = engine
        app.state.session_factory = create_session_factory(engine)

        if app_settings.create_tables_on_startup:
            try:
                await create_tables(engine)
                logger.info("Database tables created/verified")
            except Exception as e:
                logger.error("Failed to create database tables", exc_info=e)
                raise

        if app_settings.seed_demo_data:
            async with app.state.session_factory() as session:
                await seed_demo_data(session)

        yield

        # Shutdown
        logger.info("Shutting down TenantNotes application")
        await engine.dispose()

    app = FastAPI(
        title=app_settings.app_name,
        description="Multi-tenant notes API with plan quotas and role-based access",
        version=__version__,
        lifespan=lifespan,
    )

    if settings is not None:
        app.dependency_overrides[get_settings] = lambda: settings

    # Add logging middleware
    app.add_middleware(LoggingMiddleware)

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=app_settings.cors_origins,
        allow_credentials=app_settings.cors_allow_credentials,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app, app_settings)

    # Include routers
    app.include_router(auth_router, prefix="/api")
    app.include_router(notes_router, prefix="/api")
    app.include_router(tenants_router, prefix="/api")
    app.include_router(health_router, prefix="/api")

    # Liveness probe, no auth and no database
    @app.get("/health", response_model=LivenessResponse)
    async def basic_health():
        return LivenessResponse()

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    uvicorn.run("tenantnotes.main:app", host=settings.host, port=settings.port, reload=settings.reload)
