from __future__ import annotations

import logging

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from core.points.errors import PointsError, malformed

logger = logging.getLogger(__name__)


def _envelope(exc: PointsError) -> JSONResponse:
    return JSONResponse(
        status_code=exc.http_status,
        content={
            "code": exc.code,
            "message": exc.detail,
            "meta": exc.meta,
        },
    )


async def points_error_handler(request: Request, exc: PointsError) -> JSONResponse:
    """
    This is the ONLY place where HTTP status codes and the error response
    shape are decided for core points errors.
    """
    logger.warning("%s %s rejected: %s", request.method, request.url.path, exc)
    return _envelope(exc)


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    # A body that is not Receipt-shaped is a client error (400), same envelope as core errors.
    errors = [{"loc": list(e.get("loc", ())), "msg": e.get("msg", "")} for e in exc.errors()]
    err = malformed("Invalid receipt format.", {"errors": errors})
    logger.warning("%s %s rejected: %s (%d validation errors)", request.method, request.url.path, err, len(errors))
    return _envelope(err)
