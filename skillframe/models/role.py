"""
role.py
- Purpose: A role whose competency framework is tracked (IC or management track).
"""

import uuid
from datetime import datetime
from sqlalchemy import String, Text, DateTime, Uuid
from sqlalchemy.orm import relationship, Mapped, mapped_column

from skillframe.constants.levels import RoleType
from skillframe.models.base import Base, utcnow


class Role(Base):
    __tablename__ = "roles"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    title: Mapped[str] = mapped_column(Text, nullable=False)
    type: Mapped[str] = mapped_column(String(32), nullable=False, default=RoleType.IC.value)

    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=False), default=utcnow, nullable=False)

    levels: Mapped[list["RoleLevel"]] = relationship(
        back_populates="role",
        cascade="all, delete-orphan",
        order_by="RoleLevel.order_index",
    )
    competencies: Mapped[list["Competency"]] = relationship(
        back_populates="role",
        cascade="all, delete-orphan",
        order_by="Competency.order_index",
    )
