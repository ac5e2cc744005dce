from __future__ import annotations

import logging

from skillframe.celery_app import celery_app
from skillframe.core import AppError
from skillframe.core.request_context import clear_context, set_context
from skillframe.db.session import SessionLocal

logger = logging.getLogger("skillframe.tasks.migration_pipeline")


@celery_app.task(
    name="skillframe.tasks.migration_pipeline.run_migrations_task",
    bind=True,
    max_retries=3,
    default_retry_delay=30,
)
def run_migrations_task(self):
    """
    Full level migration:
      seed role levels -> backfill level_criteria -> translate legacy keys -> verify
    Every step is idempotent, so a retry simply resumes where data still needs it.
    """
    set_context(task_id=getattr(self.request, "id", None), operation="run_migrations")
    from skillframe.services.migration_service import MigrationService

    db = SessionLocal()
    try:
        logger.info("task.start", extra={"task": "run_migrations_task"})
        report = MigrationService(db=db).run_all()
        logger.info(
            "task.done",
            extra={"task": "run_migrations_task", "passed": report.verify.passed, "issue_count": len(report.verify.issues)},
        )
        return {"ok": True, "report": report.model_dump()}

    except AppError as e:
        logger.warning("task.app_error", extra={"task": "run_migrations_task", "error": str(e)})
        return {"ok": False, "error": str(e)}
    except Exception as e:
        db.rollback()
        logger.exception("task.retry", extra={"task": "run_migrations_task"})
        raise self.retry(exc=e)
    finally:
        db.close()
        clear_context()
