"""FastAPI application factory."""

from __future__ import annotations
import os

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from loguru import logger

from holeplacer.errors import PlacerError, ConfigurationError
from holeplacer.logging_config import setup_logging
from holeplacer.api.routes import router


async def placer_exception_handler(request: Request, exc: PlacerError) -> JSONResponse:
    """Map placer errors to JSON without leaking tracebacks."""
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    if isinstance(exc, ConfigurationError):
        status_code = status.HTTP_400_BAD_REQUEST

    logger.error(
        "Placer exception: {type} - {message}",
        type=type(exc).__name__,
        message=exc.message,
    )
    return JSONResponse(
        status_code=status_code,
        content={
            "error": type(exc).__name__,
            "message": exc.message,
            "details": exc.details,
        },
    )


def create_app() -> FastAPI:
    setup_logging(os.getenv("LOG_LEVEL", "INFO"))

    app = FastAPI(
        title="Hole Placer",
        description="Places wall openings where ducts and pipes cross walls",
        version="0.1.0",
    )

    # CORS for the local frontend
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(PlacerError, placer_exception_handler)
    app.include_router(router, prefix="/api")

    return app


app = create_app()
