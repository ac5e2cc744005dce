# skillframe/main.py
from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware

from skillframe.core.config import settings
from skillframe.core.logging_config import configure_logging
from skillframe.middleware.request_logging import RequestLoggingMiddleware
from skillframe.routers.health import router as health_router
from skillframe.routers.root import router as root_router
from skillframe.routers.frameworks import router as frameworks_router
from skillframe.routers.migrations import router as migrations_router
from skillframe.core.exception_handlers import (
    app_error_handler,
    unhandled_exception_handler,
    validation_error_handler,
)
from skillframe.core import AppError

configure_logging()


def _split_csv(value: str | None) -> list[str]:
    if not value:
        return []
    return [v.strip() for v in value.split(",") if v.strip()]


def create_app() -> FastAPI:
    app = FastAPI(title=settings.app_name)

    app.add_middleware(RequestLoggingMiddleware)

    # ---- CORS (env-driven) ----
    # CORS_ALLOW_ORIGINS="http://localhost:3000,https://frameworks.example.com"
    allow_origins = _split_csv(settings.CORS_ALLOW_ORIGINS) or ["http://localhost:3000"]
    app.add_middleware(
        CORSMiddleware,
        allow_origins=allow_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Exception handlers
    app.add_exception_handler(AppError, app_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)

    # Routers
    app.include_router(root_router)
    app.include_router(health_router)
    app.include_router(frameworks_router)
    app.include_router(migrations_router)

    return app


app = create_app()
