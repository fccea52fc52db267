from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError

from adapters.http.fastapi.points_error_handler import points_error_handler, request_validation_handler
from core.points import InMemoryScoreStore, PointsError, PointsService, ScoreStore
from infra.api.routes.health import router as health_router
from infra.api.routes.receipts import router as receipts_router
from infra.api.settings import Settings, load_settings

logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None, store: Optional[ScoreStore] = None) -> FastAPI:
    """
    Build the points API.

    The store is created here, once per app, and reaches handlers only
    through ``get_points_service``. Pass ``store`` to inject a different one.
    """
    settings = settings or load_settings()
    service = PointsService(store=store if store is not None else InMemoryScoreStore(), policy=settings.parse_policy)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info(
            "server starting on port %d (parse_policy=%s)",
            settings.port,
            settings.parse_policy.value,
        )
        try:
            yield
        finally:
            logger.info("server stopped")

    app = FastAPI(title="Receipt Points API", version="1.0.0", lifespan=lifespan)
    app.state.settings = settings
    app.state.points_service = service

    app.add_exception_handler(PointsError, points_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)

    app.include_router(health_router)
    app.include_router(receipts_router)
    return app
