"""
api/main.py — punkt wejścia FastAPI.

Aplikacja jest bezstanowa: każde żądanie buduje własne drzewo i kontekst,
więc cache operatorów nie jest współdzielony między żądaniami.
"""
from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from api.routers import evaluate
from api.schemas import HealthResponse
from config import Settings

logger = logging.getLogger("partial_eval")


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or Settings()
    logging.basicConfig(level=settings.log_level.upper())

    app = FastAPI(
        title=settings.app_title,
        version=settings.app_version,
    )
    app.state.settings = settings

    # Routers
    app.include_router(evaluate.router)

    # Health
    @app.get("/health", response_model=HealthResponse, tags=["health"])
    async def health():
        return HealthResponse(status="ok", version=settings.app_version)

    # Globalny handler błędów (nieznany operator, zbyt głębokie drzewo)
    @app.exception_handler(ValueError)
    async def value_error_handler(request: Request, exc: ValueError):
        logger.warning("Rejected request to %s: %s", request.url.path, exc)
        return JSONResponse(status_code=422, content={"detail": str(exc)})

    logger.info("%s API ready.", settings.app_title)
    return app


app = create_app()
