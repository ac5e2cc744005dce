"""
sub_competency.py
- Purpose: One gradable sub-skill with criteria per level.
- Storage shapes: `level_criteria` (unified map, level key -> criteria) and the
  five legacy columns from the fixed 5-level scheme. Legacy columns are kept
  as historical residue; nothing writes them after migration.
"""

import uuid
from datetime import datetime
from sqlalchemy import Text, DateTime, ForeignKey, Integer, Uuid, Index
from sqlalchemy.orm import relationship, Mapped, mapped_column

from skillframe.models.base import Base, JsonType, utcnow


class SubCompetency(Base):
    __tablename__ = "sub_competencies"
    __table_args__ = (
        Index("ix_sub_competencies_competency_order", "competency_id", "order_index"),
    )

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    competency_id: Mapped[uuid.UUID] = mapped_column(Uuid, ForeignKey("competencies.id"), nullable=False)

    title: Mapped[str] = mapped_column(Text, nullable=False)
    code: Mapped[str | None] = mapped_column(Text, nullable=True)
    order_index: Mapped[int] = mapped_column(Integer, nullable=False, default=0)

    level_criteria: Mapped[dict | None] = mapped_column(JsonType, nullable=True)

    # legacy fixed 5-level columns
    associate_level: Mapped[list | None] = mapped_column(JsonType, nullable=True)
    intermediate_level: Mapped[list | None] = mapped_column(JsonType, nullable=True)
    senior_level: Mapped[list | None] = mapped_column(JsonType, nullable=True)
    lead_level: Mapped[list | None] = mapped_column(JsonType, nullable=True)
    principal_level: Mapped[list | None] = mapped_column(JsonType, nullable=True)

    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=False), default=utcnow, nullable=False)

    competency: Mapped["Competency"] = relationship(back_populates="sub_competencies")
