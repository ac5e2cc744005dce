"""
role/read.py
- Purpose: Read-side DB operations for Role.
"""

from sqlalchemy.orm import Session
from skillframe.models.role import Role


class RoleReadRepo:
    def __init__(self, db: Session):
        self.db = db

    def get_by_id(self, role_id) -> Role | None:
        return self.db.query(Role).filter(Role.id == role_id).first()

    def list_all(self) -> list[Role]:
        return self.db.query(Role).order_by(Role.created_at.asc()).all()
