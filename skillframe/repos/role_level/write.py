"""
role_level/write.py
- Purpose: Write-side DB operations for a role's level registry.
- Design: No business logic; persistence only. Caller owns the transaction.
"""

from sqlalchemy.orm import Session
from skillframe.models.role_level import RoleLevel


class RoleLevelWriteRepo:
    def __init__(self, db: Session):
        self.db = db

    def insert_level(self, role_id, *, key: str, label: str, description: str | None, order_index: int) -> RoleLevel:
        row = RoleLevel(
            role_id=role_id,
            key=key,
            label=label,
            description=description,
            order_index=order_index,
        )
        self.db.add(row)
        self.db.flush()
        return row
