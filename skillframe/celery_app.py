# skillframe/celery_app.py
from celery import Celery
from dotenv import load_dotenv

load_dotenv()

from skillframe.core.config import settings  # noqa: E402  (after .env is loaded)
from skillframe.core.logging_config import configure_logging  # noqa: E402

# Ensure logging is configured in worker processes as early as possible.
configure_logging()

BROKER_URL = settings.REDIS_BROKER_URL
BACKEND_URL = settings.CELERY_RESULT_BACKEND or BROKER_URL

celery_app = Celery(
    "level_migrations",
    broker=BROKER_URL,
    backend=BACKEND_URL,
    include=["skillframe.tasks.migration_pipeline"],
)

# reliability defaults (important for at-least-once)
celery_app.conf.task_acks_late = True
celery_app.conf.worker_prefetch_multiplier = 1
celery_app.conf.task_reject_on_worker_lost = True

# prevent Celery from overriding our root logger
celery_app.conf.worker_hijack_root_logger = False

# one queue for migrations; run a single worker on it so the same record is
# never migrated by two runs at once
celery_app.conf.task_routes = {
    "skillframe.tasks.migration_pipeline.run_migrations_task": {"queue": "migrations_q"},
}
