from __future__ import annotations

import re
import time
import uuid
import logging

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import Response

from skillframe.core.request_context import set_context, clear_context


logger = logging.getLogger("skillframe.http")

# Routing hasn't happened yet inside middleware, so ids come off the raw path.
_ROLE_PATH = re.compile(r"^/api/roles/([0-9a-fA-F-]{32,36})(?:/|$)")
_MIGRATION_PATH = re.compile(r"^/api/migrations/([a-z-]+)$")


def _path_context(path: str) -> dict:
    role = _ROLE_PATH.match(path)
    if role:
        return {"role_id": role.group(1)}
    migration = _MIGRATION_PATH.match(path)
    if migration:
        return {"operation": f"migrations.{migration.group(1)}"}
    return {}


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next):
        rid = request.headers.get("x-request-id") or str(uuid.uuid4())
        path = request.url.path
        set_context(request_id=rid, **_path_context(path))

        t0 = time.perf_counter()
        logger.info(
            "http.request",
            extra={"method": request.method, "path": path, "query": str(request.url.query)},
        )
        try:
            response: Response = await call_next(request)
        except Exception:
            logger.exception(
                "http.failed",
                extra={"method": request.method, "path": path, "duration_ms": _elapsed_ms(t0)},
            )
            raise
        else:
            logger.info(
                "http.response",
                extra={
                    "method": request.method,
                    "path": path,
                    "status_code": response.status_code,
                    "duration_ms": _elapsed_ms(t0),
                },
            )
            response.headers["x-request-id"] = rid
            return response
        finally:
            clear_context()


def _elapsed_ms(t0: float) -> int:
    return int((time.perf_counter() - t0) * 1000)
