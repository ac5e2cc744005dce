"""
role_level.py
- Purpose: One rung of a role's level registry (P1 Entry, M2 Manager...).
"""

import uuid
from datetime import datetime
from sqlalchemy import String, Text, DateTime, ForeignKey, Integer, Uuid, UniqueConstraint, Index
from sqlalchemy.orm import relationship, Mapped, mapped_column

from skillframe.models.base import Base, utcnow


class RoleLevel(Base):
    __tablename__ = "role_levels"
    __table_args__ = (
        UniqueConstraint("role_id", "key", name="uq_role_levels_role_key"),
        Index("ix_role_levels_role_order", "role_id", "order_index"),
    )

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    role_id: Mapped[uuid.UUID] = mapped_column(Uuid, ForeignKey("roles.id"), nullable=False)

    key: Mapped[str] = mapped_column(String(64), nullable=False)   # p1_entry, m2_manager...
    label: Mapped[str] = mapped_column(Text, nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    order_index: Mapped[int] = mapped_column(Integer, nullable=False, default=0)

    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=False), default=utcnow, nullable=False)

    role: Mapped["Role"] = relationship(back_populates="levels")
