"""
role_level/read.py
- Purpose: Read-side DB operations for a role's level registry.
"""

from sqlalchemy.orm import Session
from skillframe.models.role_level import RoleLevel


class RoleLevelReadRepo:
    def __init__(self, db: Session):
        self.db = db

    def list_by_role(self, role_id) -> list[RoleLevel]:
        return (
            self.db.query(RoleLevel)
            .filter(RoleLevel.role_id == role_id)
            .order_by(RoleLevel.order_index.asc())
            .all()
        )

    def count_by_role(self, role_id) -> int:
        return self.db.query(RoleLevel).filter(RoleLevel.role_id == role_id).count()
