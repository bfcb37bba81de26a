"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from homebite.api.assistant import router as assistant_router
from homebite.api.meals import router as meals_router
from homebite.api.orders import router as orders_router
from homebite.app_logging import configure_logging
from homebite.config import parse_cors_origins
from homebite.containers import AppContainer
from homebite.domain.errors import (
    DuplicateRatingError,
    HomebiteError,
    InvalidInputError,
    InvalidScoreError,
    InvalidTransitionError,
    NotEligibleError,
    NotFoundError,
    SoldOutError,
    UnauthenticatedError,
)

_ERROR_STATUS: dict[type[HomebiteError], int] = {
    NotFoundError: status.HTTP_404_NOT_FOUND,
    SoldOutError: status.HTTP_409_CONFLICT,
    InvalidTransitionError: status.HTTP_409_CONFLICT,
    DuplicateRatingError: status.HTTP_409_CONFLICT,
    InvalidScoreError: status.HTTP_422_UNPROCESSABLE_ENTITY,
    NotEligibleError: status.HTTP_403_FORBIDDEN,
    InvalidInputError: status.HTTP_400_BAD_REQUEST,
    UnauthenticatedError: status.HTTP_401_UNAUTHORIZED,
}


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging(container.settings.log_level)
    logger = logging.getLogger(__name__)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        yield
        await app.state.container.close_resources()

    app = FastAPI(title="Homebite", lifespan=lifespan)
    app.state.container = container

    app.add_middleware(
        CORSMiddleware,
        allow_origins=parse_cors_origins(container.settings.cors_allowed_origins),
        allow_methods=["*"],
        allow_headers=["authorization", "x-client-info", "apikey", "content-type"],
    )

    app.include_router(meals_router)
    app.include_router(orders_router)
    app.include_router(assistant_router)

    @app.exception_handler(HomebiteError)
    async def handle_domain_error(request: Request, exc: HomebiteError) -> JSONResponse:
        status_code = error_status(exc)
        if status_code >= status.HTTP_500_INTERNAL_SERVER_ERROR:
            logger.error("Unmapped domain error: %s", exc)
        else:
            logger.info(
                "Request rejected: %s %s -> %s",
                request.method,
                request.url.path,
                exc.code,
            )
        return JSONResponse(
            status_code=status_code,
            content={"error": exc.code, "message": exc.message},
        )

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    return app


def error_status(exc: HomebiteError) -> int:
    """Return the HTTP status for a domain error."""
    for error_type in type(exc).__mro__:
        if error_type in _ERROR_STATUS:
            return _ERROR_STATUS[error_type]
    return status.HTTP_500_INTERNAL_SERVER_ERROR
