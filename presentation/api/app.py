"""
FastAPI application factory.

Creates and configures the FastAPI app with all routes, middleware,
domain-error handlers and the dependency injection Container.
"""

import logging
import time
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, Response, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from domain.exceptions import (
    AuthError,
    ConflictError,
    NotFoundError,
    StoreUnavailable,
    ValidationError,
)
from presentation.api.routes import auth, health, movies, users
from shared.container import Container
from shared.logging.correlation import generate_correlation_id, set_correlation_id

logger = logging.getLogger(__name__)


def _register_exception_handlers(app: FastAPI) -> None:
    """Map the domain error taxonomy onto HTTP responses."""

    @app.exception_handler(ValidationError)
    async def validation_error_handler(request: Request, exc: ValidationError):
        return JSONResponse(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            content={"errors": exc.errors},
        )

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        # Missing or mistyped body fields use the same shape as ValidationError
        errors = [
            {"field": str(err["loc"][-1]) if err.get("loc") else "body", "msg": err["msg"]}
            for err in exc.errors()
        ]
        return JSONResponse(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            content={"errors": errors},
        )

    @app.exception_handler(AuthError)
    async def auth_error_handler(request: Request, exc: AuthError):
        return JSONResponse(
            status_code=status.HTTP_401_UNAUTHORIZED,
            content={"detail": exc.message},
            headers={"WWW-Authenticate": "Bearer"},
        )

    @app.exception_handler(NotFoundError)
    async def not_found_handler(request: Request, exc: NotFoundError):
        return JSONResponse(
            status_code=status.HTTP_404_NOT_FOUND,
            content={"detail": exc.message},
        )

    @app.exception_handler(ConflictError)
    async def conflict_handler(request: Request, exc: ConflictError):
        return JSONResponse(
            status_code=status.HTTP_409_CONFLICT,
            content={"detail": exc.message},
        )

    @app.exception_handler(StoreUnavailable)
    async def store_unavailable_handler(request: Request, exc: StoreUnavailable):
        logger.error(
            "Store failure on %s %s", request.method, request.url.path,
            exc_info=exc,
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"detail": "Internal server error"},
        )

    @app.exception_handler(Exception)
    async def unhandled_error_handler(request: Request, exc: Exception):
        logger.error(
            "Unhandled error on %s %s", request.method, request.url.path,
            exc_info=exc,
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"detail": "Internal server error"},
        )


def create_app(container: Container) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        container: DI container; its init() runs on startup.

    Returns:
        Configured FastAPI application.
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        await container.init()
        yield

    app = FastAPI(
        title="Movie Catalog API",
        description=(
            "Browse movies, genres and directors and manage a personal list "
            "of favorite movies.\n\n"
            "**Authentication:** `POST /login` returns a token; pass it as "
            "`Authorization: Bearer <token>`."
        ),
        version="1.0.0",
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )
    app.state.container = container

    # Correlation ID + request log line
    @app.middleware("http")
    async def correlation_id_middleware(request: Request, call_next):
        cid = request.headers.get("X-Correlation-ID") or generate_correlation_id()
        set_correlation_id(cid)
        started = time.perf_counter()
        response: Response = await call_next(request)
        elapsed_ms = (time.perf_counter() - started) * 1000
        response.headers["X-Correlation-ID"] = cid
        logger.info(
            "%s %s %d %.1fms",
            request.method, request.url.path, response.status_code, elapsed_ms,
        )
        return response

    app.add_middleware(
        CORSMiddleware,
        allow_origins=container.settings.api.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    _register_exception_handlers(app)

    app.include_router(health.router)
    app.include_router(auth.router)
    app.include_router(movies.router)
    app.include_router(users.router)

    logger.info(f"REST API configured: {len(app.routes)} routes, docs at /docs")

    return app
