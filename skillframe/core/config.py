# skillframe/core/config.py
import os
from pathlib import Path
from pydantic_settings import BaseSettings, SettingsConfigDict

PROJECT_ROOT = Path(__file__).parent.parent.parent

class Settings(BaseSettings):
    app_name: str = "SkillFrame"
    env: str = "local"
    DATABASE_URL: str

    LOG_LEVEL: str = "INFO"

    # Comma separated, e.g. "http://localhost:3000,https://frameworks.example.com"
    CORS_ALLOW_ORIGINS: str | None = None

    # =========================
    # Background migrations
    # =========================
    REDIS_BROKER_URL: str = "redis://localhost:6379/0"
    CELERY_RESULT_BACKEND: str | None = None

    # =========================
    # Framework interchange
    # =========================
    IMPORT_MAX_BYTES: int = 2 * 1024 * 1024
    DEFAULT_EXPORT_FORMAT: str = "markdown"  # markdown | json

    model_config = SettingsConfigDict(
        env_file=os.path.join(PROJECT_ROOT, ".env"),
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

settings = Settings()
