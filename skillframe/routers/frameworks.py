"""
frameworks.py
- Purpose: API routes for role levels and framework export/import.
- Design: Keep router thin. Delegate business logic to FrameworkService.
"""

from uuid import UUID

from fastapi import APIRouter, Depends, Query
from fastapi.responses import PlainTextResponse

from skillframe.api.deps import get_framework_service, get_migration_service
from skillframe.core.config import settings
from skillframe.schemas.framework_schema import (
    CriteriaResponse,
    FrameworkHealthResponse,
    FrameworkImportRequest,
    FrameworkImportResponse,
    FrameworkPreviewResponse,
    RoleLevelsResponse,
)
from skillframe.schemas.migration_schema import SeedRoleResult
from skillframe.services.framework_service import FrameworkService
from skillframe.services.migration_service import MigrationService

router = APIRouter(prefix="/api", tags=["Frameworks"])

_MEDIA_TYPES = {"json": "application/json", "markdown": "text/markdown"}


@router.get("/roles/{role_id}/levels", response_model=RoleLevelsResponse)
def get_role_levels(role_id: UUID, svc: FrameworkService = Depends(get_framework_service)):
    return svc.get_levels(role_id)


@router.post("/roles/{role_id}/levels/seed", response_model=SeedRoleResult)
def seed_role_levels(
    role_id: UUID,
    role_type: str | None = Query(None, pattern="^(ic|management)$"),
    svc: MigrationService = Depends(get_migration_service),
):
    return svc.seed_default_levels(role_id, role_type)


@router.get("/roles/{role_id}/framework/export", response_class=PlainTextResponse)
def export_framework(
    role_id: UUID,
    fmt: str | None = Query(None, alias="format"),
    svc: FrameworkService = Depends(get_framework_service),
):
    fmt = (fmt or settings.DEFAULT_EXPORT_FORMAT).lower()
    body = svc.export_framework(role_id, fmt)
    return PlainTextResponse(body, media_type=_MEDIA_TYPES.get(fmt, "text/plain"))


@router.post("/roles/{role_id}/framework/preview", response_model=FrameworkPreviewResponse)
def preview_framework(
    role_id: UUID,
    payload: FrameworkImportRequest,
    svc: FrameworkService = Depends(get_framework_service),
):
    return svc.preview_import(role_id, payload.content)


@router.post("/roles/{role_id}/framework/import", response_model=FrameworkImportResponse, status_code=201)
def import_framework(
    role_id: UUID,
    payload: FrameworkImportRequest,
    svc: FrameworkService = Depends(get_framework_service),
):
    return svc.import_framework(role_id, payload.content)


@router.get("/roles/{role_id}/framework/health", response_model=FrameworkHealthResponse)
def framework_health(role_id: UUID, svc: FrameworkService = Depends(get_framework_service)):
    return svc.framework_health(role_id)


@router.get("/sub-competencies/{sub_id}/criteria/{level_key}", response_model=CriteriaResponse)
def get_criteria(sub_id: UUID, level_key: str, svc: FrameworkService = Depends(get_framework_service)):
    return svc.get_criteria(sub_id, level_key)
