"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from spin_wheel.api.wheel import router as wheel_router
from spin_wheel.app_logging import configure_logging
from spin_wheel.containers import AppContainer


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging(container.settings.log_level)
    logger = logging.getLogger(__name__)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        state_container: AppContainer = app.state.container
        logger.info(
            "Wheel ready with %d segments",
            len(state_container.segment_service.list_segments()),
        )
        yield

    app = FastAPI(lifespan=lifespan)
    app.state.container = container

    app.include_router(wheel_router)

    @app.exception_handler(RequestValidationError)
    async def validation_error(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        """Report malformed request bodies as bad requests."""
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={
                "detail": _validation_message(request.url.path),
                "errors": jsonable_encoder(exc.errors()),
            },
        )

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    return app


def _validation_message(path: str) -> str:
    if path.startswith("/api/session"):
        return "Invalid session data"
    if path.startswith("/api/wheel"):
        return "Invalid rotation data"
    return "Invalid segment data"
