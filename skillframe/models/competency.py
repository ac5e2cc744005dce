"""
competency.py
- Purpose: One competency (skill area) of a role's framework.
"""

import uuid
from datetime import datetime
from sqlalchemy import Text, DateTime, ForeignKey, Integer, Uuid, Index
from sqlalchemy.orm import relationship, Mapped, mapped_column

from skillframe.models.base import Base, utcnow


class Competency(Base):
    __tablename__ = "competencies"
    __table_args__ = (
        Index("ix_competencies_role_order", "role_id", "order_index"),
    )

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    role_id: Mapped[uuid.UUID] = mapped_column(Uuid, ForeignKey("roles.id"), nullable=False)

    title: Mapped[str] = mapped_column(Text, nullable=False)
    code: Mapped[str | None] = mapped_column(Text, nullable=True)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    order_index: Mapped[int] = mapped_column(Integer, nullable=False, default=0)

    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=False), default=utcnow, nullable=False)

    role: Mapped["Role"] = relationship(back_populates="competencies")
    sub_competencies: Mapped[list["SubCompetency"]] = relationship(
        back_populates="competency",
        cascade="all, delete-orphan",
        order_by="SubCompetency.order_index",
    )
