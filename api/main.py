import time
from contextlib import asynccontextmanager
from typing import Optional

import structlog
from dependency_injector import providers
from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.middleware.cors import CORSMiddleware
from starlette.requests import Request

from api.shared.dtos import ErrorResponse, HealthCheckResponse
from core.logging import configure_logging
from core.settings import Settings, get_settings
from di.container import ApplicationContainer as DependencyContainer

logger = structlog.get_logger("currency")


class CustomFastAPI(FastAPI):
    container: DependencyContainer
    settings: Settings


@asynccontextmanager
async def lifespan(_app: CustomFastAPI):
    logger.info("Starting application initialization...")
    start_time = time.time()

    try:
        db_start = time.time()
        db_resource = _app.container.infrastructure.database()
        await db_resource.init()
        if _app.settings.DATABASE.AUTO_CREATE_SCHEMA:
            from api.shared.entities.registry import BaseEntity

            await db_resource.create_schema(BaseEntity.metadata)
        await db_resource.ping()
        logger.info(
            "Database connection established",
            elapsed=f"{time.time() - db_start:.2f}s",
        )
        logger.info(
            "Application startup completed",
            elapsed=f"{time.time() - start_time:.2f}s",
        )
    except Exception as e:
        logger.exception("Failed to initialize application", error=str(e))
        raise

    yield

    try:
        db_resource = _app.container.infrastructure.database()
        if db_resource:
            await db_resource.shutdown()
        logger.info("Application shutdown complete")
    except Exception as e:
        logger.exception("Error during shutdown", error=str(e))


def _error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=ErrorResponse(error=message, status_code=status_code).model_dump(),
    )


def register_exception_handlers(_app: FastAPI) -> None:
    @_app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        return _error_response(exc.status_code, str(exc.detail))

    @_app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        logger.info("Request validation failed", path=request.url.path, errors=exc.errors())
        return _error_response(400, "Validation Error")

    @_app.exception_handler(Exception)
    async def general_exception_handler(request: Request, exc: Exception):
        logger.exception("Unhandled exception", path=request.url.path)
        return _error_response(500, "Internal Server Error")


def create_fastapi_app(settings: Optional[Settings] = None) -> CustomFastAPI:
    """Build a new application with its own dependency container.

    Serve with ``uvicorn --factory api.main:create_fastapi_app``.
    """
    settings = settings or get_settings()
    configure_logging(settings.APP)

    # Interactive docs are not published in production
    docs_enabled = settings.APP.ENVIRONMENT != "prod"

    _app = CustomFastAPI(
        title="Currency Converter API",
        description="User accounts, saved conversions and exchange rates",
        version="0.1.0",
        lifespan=lifespan,
        docs_url="/docs" if docs_enabled else None,
        redoc_url="/redoc" if docs_enabled else None,
        openapi_url="/openapi.json" if docs_enabled else None,
    )
    _app.settings = settings

    # Initialize dependency container
    _app.container = DependencyContainer(settings=providers.Object(settings))

    _app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(_app)

    # Include feature routers
    from api.features.auth.router import router as auth_router
    from api.features.conversions.router import router as conversions_router
    from api.features.rates.router import router as rates_router

    _app.include_router(auth_router, tags=["Auth"])
    _app.include_router(rates_router, tags=["Exchange Rates"])
    _app.include_router(conversions_router, tags=["Conversions"])

    @_app.get("/health", response_model=HealthCheckResponse, tags=["Health"])
    async def health():
        return HealthCheckResponse(status="ok")

    return _app
