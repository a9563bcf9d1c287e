"""FastAPI application factory."""

from __future__ import annotations

import logging
import sys

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from moonglass.config import get_settings
from phases import InvalidInput, PhaseNotFound

from api.routers import health, public

logger = logging.getLogger(__name__)


def _configure_logging() -> None:
    logging.basicConfig(
        level=get_settings().log_level.upper(),
        format="%(asctime)s %(levelname)-8s %(name)s: %(message)s",
        stream=sys.stdout,
    )


async def _invalid_input_handler(request: Request, exc: InvalidInput) -> JSONResponse:
    return JSONResponse(
        status_code=422,
        content={"detail": str(exc), "parameter": exc.label},
    )


async def _phase_not_found_handler(request: Request, exc: PhaseNotFound) -> JSONResponse:
    logger.error("Phase search failed for %s: %s", request.url.path, exc)
    return JSONResponse(status_code=500, content={"detail": str(exc)})


def create_app() -> FastAPI:
    _configure_logging()
    app = FastAPI(title="Moonglass API", version="0.1.0")
    settings = get_settings()
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.api_allowed_origins,
        allow_credentials=False,
        allow_methods=["GET"],
        allow_headers=["*"],
    )
    app.add_exception_handler(InvalidInput, _invalid_input_handler)
    app.add_exception_handler(PhaseNotFound, _phase_not_found_handler)
    app.include_router(health.router, tags=["health"])
    app.include_router(public.router, prefix="/v1", tags=["public"])
    return app


app = create_app()
