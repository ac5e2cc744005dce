"""
framework_schema.py
- Purpose: Request/response DTOs for the framework (levels, export, import) routes.
"""

from typing import Dict, List, Literal, Optional
from uuid import UUID

from pydantic import BaseModel, Field

from skillframe.levels import registry
from skillframe.schemas.interchange_schema import InterchangeDocument


class LevelOut(BaseModel):
    key: str
    label: str
    description: Optional[str] = None
    order_index: int
    base_score: int


class RoleLevelsResponse(BaseModel):
    role_id: UUID
    role_type: str
    source: Literal["stored", "default"]
    levels: List[LevelOut]
    max_chart_scale: int

    @classmethod
    def build(cls, role, levels, *, source: str) -> "RoleLevelsResponse":
        scores = registry.build_base_scores(levels)
        ordered = registry.ordered(levels)
        return cls(
            role_id=role.id,
            role_type=str(role.type),
            source=source,
            levels=[
                LevelOut(
                    key=lvl.key,
                    label=lvl.label,
                    description=lvl.description,
                    order_index=lvl.order_index,
                    base_score=scores[lvl.key],
                )
                for lvl in ordered
            ],
            max_chart_scale=registry.max_chart_scale(levels, [lvl.key for lvl in ordered]),
        )


class FrameworkImportRequest(BaseModel):
    content: str = Field(min_length=1)


class FrameworkPreviewResponse(BaseModel):
    format: Literal["json", "markdown"]
    document: InterchangeDocument


class FrameworkImportResponse(BaseModel):
    role_id: UUID
    format: Literal["json", "markdown"]
    competencies_created: int
    sub_competencies_created: int


class CriteriaResponse(BaseModel):
    sub_competency_id: UUID
    level_key: str
    criteria: List[str]


class LevelGap(BaseModel):
    competency_title: str
    sub_competency_id: UUID
    sub_competency_title: str
    empty_levels: List[str]


class UnevenCriteria(BaseModel):
    competency_title: str
    sub_competency_id: UUID
    sub_competency_title: str
    counts: Dict[str, int]
    min: int
    max: int


class FrameworkHealthReport(BaseModel):
    status: Literal["complete", "partial", "incomplete"]
    competencies: int
    sub_competencies: int
    level_slots: int
    filled_slots: int
    completion_pct: int
    gaps: List[LevelGap] = Field(default_factory=list)
    uneven: List[UnevenCriteria] = Field(default_factory=list)


class FrameworkHealthResponse(FrameworkHealthReport):
    role_id: UUID
    level_source: Literal["stored", "default"]
