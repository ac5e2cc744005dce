"""
models package
- Purpose: Import all ORM models so Alembic autogenerate discovers them.
- Important: Alembic only sees models that are imported somewhere.
"""

from skillframe.models.role import Role
from skillframe.models.role_level import RoleLevel
from skillframe.models.competency import Competency
from skillframe.models.sub_competency import SubCompetency

__all__ = [
    "Role",
    "RoleLevel",
    "Competency",
    "SubCompetency",
]
