"""
exception_handlers.py
- Purpose: Convert AppError, request validation failures and unexpected
  exceptions into the single `{"error": {...}}` envelope the API returns.

Also logs errors with request context so failed imports are diagnosable.
"""

from __future__ import annotations

import logging

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from skillframe.core import AppError, ErrorCode, ErrorReason

logger = logging.getLogger("skillframe.exceptions")


def _path(request: Request) -> str:
    return str(getattr(request.url, "path", ""))


async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    logger.warning(
        "app_error",
        extra={
            "path": _path(request),
            "method": request.method,
            "status_code": exc.status_code,
            "code": exc.code.value,
            "reason": exc.reason,
            "detail_message": exc.message,
        },
    )
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = [
        {"loc": list(err.get("loc", ())), "msg": err.get("msg"), "type": err.get("type")}
        for err in exc.errors()
    ]
    logger.info(
        "request_validation_error",
        extra={"path": _path(request), "method": request.method, "error_count": len(errors)},
    )
    err = AppError(
        code=ErrorCode.VALIDATION_ERROR,
        reason=ErrorReason.INVALID_INPUT.value,
        status_code=422,
        details={"errors": errors},
    )
    return JSONResponse(status_code=err.status_code, content=err.to_dict())


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception(
        "unhandled_exception",
        extra={"path": _path(request), "method": request.method},
    )
    return JSONResponse(
        status_code=500,
        content={"error": {"code": ErrorCode.INTERNAL_ERROR.value, "reason": ErrorReason.INTERNAL_ERROR.value}},
    )
