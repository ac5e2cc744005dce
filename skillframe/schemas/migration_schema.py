"""
migration_schema.py
- Purpose: Result DTOs reported by the level-migration batch operations.
- Every batch reports what it changed; skipped malformed records land in `failed`.
"""

from typing import List, Optional

from pydantic import BaseModel, Field


class SeedLevelsResult(BaseModel):
    roles_seeded: int = 0
    roles_skipped: int = 0
    levels_inserted: int = 0
    failed: int = 0


class SeedRoleResult(BaseModel):
    message: str
    count: int
    seeded: bool


class BackfillResult(BaseModel):
    subs_patched: int = 0
    subs_skipped: int = 0
    failed: int = 0


class TranslateKeysResult(BaseModel):
    subs_patched: int = 0
    subs_skipped: int = 0
    conflicts: int = 0
    failed: int = 0


class LegacyMigrationResult(BaseModel):
    message: str
    roles_seeded: int
    subs_patched: int


class VerifyReport(BaseModel):
    passed: bool
    issues: List[str] = Field(default_factory=list)
    roles_checked: int = 0
    subs_checked: int = 0


class MigrationRunReport(BaseModel):
    seed: SeedLevelsResult
    backfill: BackfillResult
    translate: TranslateKeysResult
    verify: VerifyReport


class MigrationEnqueuedResponse(BaseModel):
    task_id: str
    status: str = "QUEUED"
    note: Optional[str] = None
