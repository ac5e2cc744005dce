# skillframe/services/migration_service.py
"""
migration_service.py
- Purpose: Idempotent batch migrations from the legacy fixed 5-level scheme
  to per-role level registries and unified `level_criteria` maps.
- Owns: seeding role levels, backfilling unified maps from legacy columns,
  rewriting legacy keys to new keys, and a read-only verification pass.
- Design: Every operation is safe to re-run; already-migrated records are
  no-ops. A malformed record is logged, counted and skipped; the batch always
  completes and commits once at the end.
"""

import logging
from typing import Any

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from skillframe.constants.levels import KeyDirection, key_mapping, legacy_field_for, legacy_level_keys
from skillframe.core.errors import not_found
from skillframe.levels.registry import default_levels_for
from skillframe.models.sub_competency import SubCompetency
from skillframe.repos.competency.read import CompetencyReadRepo
from skillframe.repos.competency.write import CompetencyWriteRepo
from skillframe.repos.role.read import RoleReadRepo
from skillframe.repos.role_level.read import RoleLevelReadRepo
from skillframe.repos.role_level.write import RoleLevelWriteRepo
from skillframe.schemas.migration_schema import (
    BackfillResult,
    LegacyMigrationResult,
    MigrationRunReport,
    SeedLevelsResult,
    SeedRoleResult,
    TranslateKeysResult,
    VerifyReport,
)

logger = logging.getLogger("skillframe.migration_service")


class MalformedRecord(ValueError):
    """A stored record whose shape can't be migrated; skipped, never raised out of a batch."""


def _criteria_list(value: Any, *, field: str) -> list[str]:
    if not isinstance(value, list) or not all(isinstance(item, str) for item in value):
        raise MalformedRecord(f"{field} is not a list of strings")
    return list(value)


def criteria_from_legacy_columns(sub: SubCompetency) -> dict[str, list[str]]:
    """Unified map keyed by legacy names, built from non-empty legacy columns."""
    criteria: dict[str, list[str]] = {}
    for key in legacy_level_keys():
        column = legacy_field_for(key)
        value = getattr(sub, column)
        if value is None:
            continue
        values = _criteria_list(value, field=column)
        if values:
            criteria[key] = values
    return criteria


def translate_criteria_keys(criteria: dict[str, Any]) -> tuple[dict[str, list[str]], list[str]]:
    """
    Replace legacy keys by their new-scheme keys; other keys carried over.
    When both forms of a key are present the non-empty new-scheme entry wins
    and the legacy entry is dropped; an empty new-scheme entry is filled from
    the legacy one instead. Returns (translated map, dropped legacy keys).
    Raises MalformedRecord when any entry is not a list of strings.
    """
    legacy_to_new = key_mapping(KeyDirection.LEGACY_TO_NEW)
    checked = {key: _criteria_list(value, field=f"level_criteria[{key!r}]") for key, value in criteria.items()}

    translated = {key: values for key, values in checked.items() if key not in legacy_to_new}
    dropped: list[str] = []
    for key, values in checked.items():
        new_key = legacy_to_new.get(key)
        if new_key is None:
            continue
        if translated.get(new_key):
            dropped.append(key)
        else:
            translated[new_key] = values
    return translated, dropped


class MigrationService:
    def __init__(self, db: Session):
        self.db = db

        self.role_read = RoleReadRepo(db)
        self.level_read = RoleLevelReadRepo(db)
        self.level_write = RoleLevelWriteRepo(db)
        self.comp_read = CompetencyReadRepo(db)
        self.comp_write = CompetencyWriteRepo(db)

    # -------- Role levels --------
    def _insert_defaults(self, role_id, role_type) -> int:
        defaults = default_levels_for(role_type)
        for lvl in defaults:
            self.level_write.insert_level(
                role_id,
                key=lvl.key,
                label=lvl.label,
                description=lvl.description,
                order_index=lvl.order_index,
            )
        return len(defaults)

    def seed_default_levels(self, role_id, role_type=None) -> SeedRoleResult:
        """Seed one role; existing levels are never touched."""
        role = self.role_read.get_by_id(role_id)
        if role is None:
            raise not_found("Role not found", details={"role_id": str(role_id)})

        existing = self.level_read.count_by_role(role.id)
        if existing:
            return SeedRoleResult(message="Levels already exist for this role", count=existing, seeded=False)

        count = self._insert_defaults(role.id, role_type or role.type)
        self.db.commit()
        logger.info("migration.seed_role.done", extra={"role_id": str(role.id), "count": count})
        return SeedRoleResult(message="Default levels seeded", count=count, seeded=True)

    def seed_role_levels(self) -> SeedLevelsResult:
        result = SeedLevelsResult()
        for role in self.role_read.list_all():
            if self.level_read.count_by_role(role.id) > 0:
                result.roles_skipped += 1
                continue
            role_id = role.id
            try:
                with self.db.begin_nested():
                    inserted = self._insert_defaults(role_id, role.type)
            except SQLAlchemyError as e:
                logger.warning(
                    "migration.seed.skip_failed",
                    extra={"role_id": str(role_id), "error": e.__class__.__name__},
                )
                result.failed += 1
                continue
            result.levels_inserted += inserted
            result.roles_seeded += 1

        self.db.commit()
        logger.info("migration.seed.done", extra=result.model_dump())
        return result

    # -------- Unified criteria map --------
    def backfill_level_criteria(self) -> BackfillResult:
        result = BackfillResult()
        for sub in self.comp_read.list_all_subs():
            if sub.level_criteria is not None:
                if not isinstance(sub.level_criteria, dict):
                    self._skip(sub, "level_criteria is not a mapping", op="backfill")
                    result.failed += 1
                else:
                    result.subs_skipped += 1
                continue

            try:
                criteria = criteria_from_legacy_columns(sub)
            except MalformedRecord as e:
                self._skip(sub, str(e), op="backfill")
                result.failed += 1
                continue

            self.comp_write.patch_level_criteria(sub, criteria)
            result.subs_patched += 1

        self.db.commit()
        logger.info("migration.backfill.done", extra=result.model_dump())
        return result

    def translate_legacy_keys(self) -> TranslateKeysResult:
        result = TranslateKeysResult()
        legacy_keys = set(legacy_level_keys())
        for sub in self.comp_read.list_all_subs():
            criteria = sub.level_criteria
            if criteria is None:
                result.subs_skipped += 1
                continue
            if not isinstance(criteria, dict):
                self._skip(sub, "level_criteria is not a mapping", op="translate")
                result.failed += 1
                continue
            if legacy_keys.isdisjoint(criteria):
                result.subs_skipped += 1
                continue

            try:
                translated, dropped = translate_criteria_keys(criteria)
            except MalformedRecord as e:
                self._skip(sub, str(e), op="translate")
                result.failed += 1
                continue

            if dropped:
                result.conflicts += len(dropped)
                logger.warning(
                    "migration.translate.legacy_key_dropped",
                    extra={"sub_competency_id": str(sub.id), "dropped_keys": dropped},
                )
            self.comp_write.patch_level_criteria(sub, translated)
            result.subs_patched += 1

        self.db.commit()
        logger.info("migration.translate.done", extra=result.model_dump())
        return result

    def migrate_from_legacy(self) -> LegacyMigrationResult:
        """Seed missing role levels, then backfill unified maps."""
        seeded = self.seed_role_levels()
        backfilled = self.backfill_level_criteria()
        return LegacyMigrationResult(
            message=(
                f"Migration complete. Seeded {seeded.roles_seeded} roles, "
                f"patched {backfilled.subs_patched} sub-competencies."
            ),
            roles_seeded=seeded.roles_seeded,
            subs_patched=backfilled.subs_patched,
        )

    # -------- Diagnostics --------
    def verify(self) -> VerifyReport:
        issues: list[str] = []

        roles = self.role_read.list_all()
        for role in roles:
            if self.level_read.count_by_role(role.id) == 0:
                issues.append(f'Role "{role.title}" ({role.id}) has no role levels')

        subs = self.comp_read.list_all_subs()
        for sub in subs:
            if sub.level_criteria is None:
                issues.append(f'SubCompetency "{sub.title}" ({sub.id}) has no level criteria')

        report = VerifyReport(
            passed=not issues,
            issues=issues,
            roles_checked=len(roles),
            subs_checked=len(subs),
        )
        logger.info(
            "migration.verify.done",
            extra={"passed": report.passed, "issue_count": len(issues), "roles_checked": len(roles), "subs_checked": len(subs)},
        )
        return report

    def run_all(self) -> MigrationRunReport:
        return MigrationRunReport(
            seed=self.seed_role_levels(),
            backfill=self.backfill_level_criteria(),
            translate=self.translate_legacy_keys(),
            verify=self.verify(),
        )

    def _skip(self, sub: SubCompetency, error: str, *, op: str) -> None:
        logger.warning(
            f"migration.{op}.skip_malformed",
            extra={"sub_competency_id": str(sub.id), "error": error},
        )
