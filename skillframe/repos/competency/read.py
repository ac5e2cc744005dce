"""
competency/read.py
- Purpose: Read-side DB operations for competencies and sub-competencies.
- Design: Keeps query access patterns centralized (point lookups + equality scans).
"""

from typing import Iterable

from sqlalchemy.orm import Session
from skillframe.models.competency import Competency
from skillframe.models.sub_competency import SubCompetency


class CompetencyReadRepo:
    def __init__(self, db: Session):
        self.db = db

    def get_by_id(self, competency_id) -> Competency | None:
        return self.db.query(Competency).filter(Competency.id == competency_id).first()

    def list_by_role(self, role_id) -> list[Competency]:
        return (
            self.db.query(Competency)
            .filter(Competency.role_id == role_id)
            .order_by(Competency.order_index.asc())
            .all()
        )

    def get_sub_by_id(self, sub_id) -> SubCompetency | None:
        return self.db.query(SubCompetency).filter(SubCompetency.id == sub_id).first()

    def list_subs_by_competency(self, competency_id) -> list[SubCompetency]:
        return (
            self.db.query(SubCompetency)
            .filter(SubCompetency.competency_id == competency_id)
            .order_by(SubCompetency.order_index.asc())
            .all()
        )

    def list_subs_by_competencies(self, competency_ids: Iterable) -> list[SubCompetency]:
        ids = list(competency_ids)
        if not ids:
            return []
        return (
            self.db.query(SubCompetency)
            .filter(SubCompetency.competency_id.in_(ids))
            .order_by(SubCompetency.order_index.asc())
            .all()
        )

    def list_all_subs(self) -> list[SubCompetency]:
        return self.db.query(SubCompetency).order_by(SubCompetency.created_at.asc()).all()
