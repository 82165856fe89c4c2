from __future__ import annotations

from typing import Any, Type

import structlog
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

logger = structlog.get_logger(__name__)


async def _validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Normalize FastAPI 422 validation responses into 400 with a short error body."""
    logger.info("request.invalid", path=request.url.path, errors=len(exc.errors()))
    return JSONResponse(
        {"error": "Invalid input."}, status_code=status.HTTP_400_BAD_REQUEST
    )


async def _domain_error(request: Request, exc: Any) -> JSONResponse:
    detail = getattr(exc, "detail", None) or str(exc)
    code = getattr(exc, "code", None)
    logger.info("request.rejected", path=request.url.path, code=code)
    return JSONResponse(
        {"error": detail, "code": code},
        status_code=getattr(exc, "status_code", status.HTTP_400_BAD_REQUEST),
    )


def install_error_handlers(app: FastAPI, *domain_errors: Type[Exception]) -> FastAPI:
    """Register the shared 400 responses; domain errors expose ``detail`` and ``code``."""
    app.add_exception_handler(RequestValidationError, _validation_error)
    for error_cls in domain_errors:
        app.add_exception_handler(error_cls, _domain_error)
    return app


__all__ = ["install_error_handlers"]
