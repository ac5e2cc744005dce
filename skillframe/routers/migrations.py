"""
migrations.py
- Purpose: API routes for the legacy -> per-role level migrations.
- Design: Every step is idempotent, so re-posting is always safe.
"""

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from skillframe.api.deps import get_migration_service
from skillframe.schemas.migration_schema import (
    BackfillResult,
    LegacyMigrationResult,
    MigrationEnqueuedResponse,
    MigrationRunReport,
    SeedLevelsResult,
    TranslateKeysResult,
    VerifyReport,
)
from skillframe.services.migration_service import MigrationService

router = APIRouter(prefix="/api/migrations", tags=["Migrations"])


@router.post("/seed-levels", response_model=SeedLevelsResult)
def seed_levels(svc: MigrationService = Depends(get_migration_service)):
    return svc.seed_role_levels()


@router.post("/backfill-criteria", response_model=BackfillResult)
def backfill_criteria(svc: MigrationService = Depends(get_migration_service)):
    return svc.backfill_level_criteria()


@router.post("/from-legacy", response_model=LegacyMigrationResult)
def migrate_from_legacy(svc: MigrationService = Depends(get_migration_service)):
    return svc.migrate_from_legacy()


@router.post("/translate-keys", response_model=TranslateKeysResult)
def translate_keys(svc: MigrationService = Depends(get_migration_service)):
    return svc.translate_legacy_keys()


@router.get("/verify", response_model=VerifyReport)
def verify(svc: MigrationService = Depends(get_migration_service)):
    return svc.verify()


@router.post("/run", response_model=MigrationRunReport | MigrationEnqueuedResponse)
def run_migrations(background: bool = False, svc: MigrationService = Depends(get_migration_service)):
    if not background:
        return svc.run_all()

    from skillframe.tasks.migration_pipeline import run_migrations_task  # noqa

    result = run_migrations_task.delay()
    return JSONResponse(
        status_code=status.HTTP_202_ACCEPTED,
        content=MigrationEnqueuedResponse(task_id=str(result.id)).model_dump(),
    )
