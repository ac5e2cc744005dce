from __future__ import annotations

from types import SimpleNamespace

from skillframe.models import Competency, Role, RoleLevel, SubCompetency


def create_role(db, *, title: str = "Software Engineer", type: str = "ic") -> Role:
    role = Role(title=title, type=type)
    db.add(role)
    db.commit()
    return role


def create_role_level(db, role: Role, *, key: str, label: str, order_index: int) -> RoleLevel:
    level = RoleLevel(role_id=role.id, key=key, label=label, order_index=order_index)
    db.add(level)
    db.commit()
    return level


def create_competency(db, role: Role, *, title: str, order_index: int = 0, description: str | None = None) -> Competency:
    comp = Competency(role_id=role.id, title=title, order_index=order_index, description=description)
    db.add(comp)
    db.commit()
    return comp


def create_sub(db, competency: Competency, *, title: str, order_index: int = 0, **fields) -> SubCompetency:
    sub = SubCompetency(competency_id=competency.id, title=title, order_index=order_index, **fields)
    db.add(sub)
    db.commit()
    return sub


def build_competency(comp_id, title: str, order_index: int, description: str | None = None, code: str | None = None):
    return SimpleNamespace(id=comp_id, title=title, order_index=order_index, description=description, code=code)


def build_sub(sub_id, competency_id, title: str, order_index: int, level_criteria=None, code: str | None = None, **legacy):
    return SimpleNamespace(
        id=sub_id,
        competency_id=competency_id,
        title=title,
        order_index=order_index,
        level_criteria=level_criteria,
        code=code,
        **legacy,
    )
