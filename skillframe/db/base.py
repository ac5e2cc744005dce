"""
db/base.py
- Purpose: Provide Base + ensure models are imported for Alembic.
"""

from skillframe.models.base import Base
import skillframe.models  # noqa: F401  (ensures models are imported)

__all__ = ["Base"]
