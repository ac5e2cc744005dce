"""
competency/write.py
- Purpose: Write-side DB operations for competencies and sub-competencies.
- Design: No business logic; persistence only. Caller owns the transaction.
"""

from sqlalchemy.orm import Session

from skillframe.models.competency import Competency
from skillframe.models.sub_competency import SubCompetency


class CompetencyWriteRepo:
    def __init__(self, db: Session):
        self.db = db

    def create_competency(
        self,
        role_id,
        *,
        title: str,
        order_index: int,
        code: str | None = None,
        description: str | None = None,
    ) -> Competency:
        row = Competency(
            role_id=role_id,
            title=title,
            code=code,
            description=description,
            order_index=order_index,
        )
        self.db.add(row)
        self.db.flush()
        return row

    def create_sub_competency(
        self,
        competency_id,
        *,
        title: str,
        order_index: int,
        code: str | None = None,
        level_criteria: dict[str, list[str]] | None = None,
    ) -> SubCompetency:
        row = SubCompetency(
            competency_id=competency_id,
            title=title,
            code=code,
            order_index=order_index,
            level_criteria=level_criteria,
        )
        self.db.add(row)
        self.db.flush()
        return row

    def patch_level_criteria(self, sub: SubCompetency, level_criteria: dict[str, list[str]]) -> SubCompetency:
        # Always assign a fresh dict; in-place JSON mutation isn't tracked.
        sub.level_criteria = dict(level_criteria)
        self.db.flush()
        return sub
