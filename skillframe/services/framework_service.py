# skillframe/services/framework_service.py
"""
framework_service.py
- Purpose: Orchestrates framework interchange for one role: effective levels,
  export, preview/import of documents, and criteria lookups.
- Owns: role lookup, codec selection, persisting imported frameworks via repos.
- Design: Codecs and the resolver stay pure; this service does the DB work.
"""

import logging

from sqlalchemy.orm import Session

from skillframe.core import ErrorCode, ErrorReason
from skillframe.core.errors import bad_request, not_found
from skillframe.interchange.detect import InterchangeFormat, detect_format, parse_content
from skillframe.interchange.json_format import export_to_json
from skillframe.interchange.markdown_format import export_to_markdown
from skillframe.levels.criteria import resolve
from skillframe.levels.health import framework_health
from skillframe.levels.registry import default_levels_for
from skillframe.models.role import Role
from skillframe.repos.competency.read import CompetencyReadRepo
from skillframe.repos.competency.write import CompetencyWriteRepo
from skillframe.repos.role.read import RoleReadRepo
from skillframe.repos.role_level.read import RoleLevelReadRepo
from skillframe.schemas.framework_schema import (
    CriteriaResponse,
    FrameworkHealthResponse,
    FrameworkImportResponse,
    FrameworkPreviewResponse,
    RoleLevelsResponse,
)
from skillframe.validations.framework_validators import validate_import_content

logger = logging.getLogger("skillframe.framework_service")


class FrameworkService:
    def __init__(self, db: Session):
        self.db = db

        self.role_read = RoleReadRepo(db)
        self.level_read = RoleLevelReadRepo(db)
        self.comp_read = CompetencyReadRepo(db)
        self.comp_write = CompetencyWriteRepo(db)

    def _get_role(self, role_id) -> Role:
        role = self.role_read.get_by_id(role_id)
        if not role:
            raise not_found("Role not found", details={"role_id": str(role_id)})
        return role

    def effective_levels(self, role: Role) -> tuple[list, str]:
        """Stored registry when present, else the defaults for the role type."""
        stored = self.level_read.list_by_role(role.id)
        if stored:
            return stored, "stored"
        return list(default_levels_for(role.type)), "default"

    def get_levels(self, role_id) -> RoleLevelsResponse:
        role = self._get_role(role_id)
        levels, source = self.effective_levels(role)
        return RoleLevelsResponse.build(role, levels, source=source)

    def export_framework(self, role_id, fmt: str) -> str:
        try:
            target = InterchangeFormat(fmt.lower())
        except ValueError:
            raise bad_request(
                ErrorReason.UNSUPPORTED_FORMAT,
                code=ErrorCode.EXPORT_UNSUPPORTED_FORMAT,
                details={"format": fmt, "supported": [f.value for f in InterchangeFormat]},
            ) from None

        role = self._get_role(role_id)
        competencies = self.comp_read.list_by_role(role.id)
        subs = self.comp_read.list_subs_by_competencies(c.id for c in competencies)

        logger.info(
            "framework.export",
            extra={"role_id": str(role.id), "format": target.value, "competencies": len(competencies), "sub_competencies": len(subs)},
        )
        if target is InterchangeFormat.JSON:
            return export_to_json(competencies, subs)
        levels, _ = self.effective_levels(role)
        return export_to_markdown(competencies, subs, levels)

    def preview_import(self, role_id, content: str) -> FrameworkPreviewResponse:
        role = self._get_role(role_id)
        validate_import_content(content)
        levels, _ = self.effective_levels(role)
        doc = parse_content(content, levels)
        return FrameworkPreviewResponse(format=detect_format(content).value, document=doc)

    def import_framework(self, role_id, content: str) -> FrameworkImportResponse:
        """Parse a document and append its competencies after the role's existing ones."""
        role = self._get_role(role_id)
        validate_import_content(content)
        levels, _ = self.effective_levels(role)
        fmt = detect_format(content)
        doc = parse_content(content, levels)

        existing = self.comp_read.list_by_role(role.id)
        next_index = max((c.order_index for c in existing), default=-1) + 1

        subs_created = 0
        for offset, comp in enumerate(doc.competencies):
            row = self.comp_write.create_competency(
                role.id,
                title=comp.title,
                code=comp.code,
                description=comp.description,
                order_index=next_index + offset,
            )
            for sub_index, sub in enumerate(comp.sub_competencies):
                self.comp_write.create_sub_competency(
                    row.id,
                    title=sub.title,
                    code=sub.code,
                    order_index=sub_index,
                    level_criteria=dict(sub.level_criteria),
                )
                subs_created += 1

        self.db.commit()
        logger.info(
            "framework.imported",
            extra={"role_id": str(role.id), "format": fmt.value, "competencies": len(doc.competencies), "sub_competencies": subs_created},
        )
        return FrameworkImportResponse(
            role_id=role.id,
            format=fmt.value,
            competencies_created=len(doc.competencies),
            sub_competencies_created=subs_created,
        )

    def framework_health(self, role_id) -> FrameworkHealthResponse:
        role = self._get_role(role_id)
        levels, source = self.effective_levels(role)
        competencies = self.comp_read.list_by_role(role.id)
        subs = self.comp_read.list_subs_by_competencies(c.id for c in competencies)

        report = framework_health(competencies, subs, levels)
        logger.info(
            "framework.health",
            extra={"role_id": str(role.id), "status": report.status, "completion_pct": report.completion_pct, "gap_count": len(report.gaps)},
        )
        return FrameworkHealthResponse(role_id=role.id, level_source=source, **report.model_dump())

    def get_criteria(self, sub_id, level_key: str) -> CriteriaResponse:
        sub = self.comp_read.get_sub_by_id(sub_id)
        if not sub:
            raise not_found("Sub-competency not found", details={"sub_competency_id": str(sub_id)})
        return CriteriaResponse(sub_competency_id=sub.id, level_key=level_key, criteria=resolve(sub, level_key))
