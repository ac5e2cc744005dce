"""
levels.py
- Purpose: Central source of truth for built-in level sequences and the
  legacy <-> new level key tables.
- Design: Tables are built once at import into read-only mappings and are
  only reachable through functions, so callers can't mutate them.
"""

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Mapping


class RoleType(str, Enum):
    IC = "ic"
    MANAGEMENT = "management"


class KeyDirection(str, Enum):
    LEGACY_TO_NEW = "legacy_to_new"
    NEW_TO_LEGACY = "new_to_legacy"


@dataclass(frozen=True)
class LevelDef:
    key: str
    label: str
    description: str | None
    order_index: int


_IC_LEVELS: tuple[LevelDef, ...] = (
    LevelDef("p1_entry", "P1 Entry", "Early Career", 0),
    LevelDef("p2_developing", "P2 Developing", "Emerging Talent", 1),
    LevelDef("p3_career", "P3 Career", "Fully Competent", 2),
    LevelDef("p4_advanced", "P4 Advanced", "Senior/Lead", 3),
    LevelDef("p5_principal", "P5 Principal", "Expert/Authority", 4),
)

_MANAGEMENT_LEVELS: tuple[LevelDef, ...] = (
    LevelDef("m1_team_lead", "M1 Team Lead", "Tactical Supervision", 0),
    LevelDef("m2_manager", "M2 Manager", "Operational Management", 1),
    LevelDef("m3_director", "M3 Director", "Strategic Management", 2),
    LevelDef("m4_senior_director", "M4 Senior Director", "Organizational Leadership", 3),
)

# Only the IC track has a legacy predecessor.
_LEGACY_TO_NEW: Mapping[str, str] = MappingProxyType(
    {
        "associate": "p1_entry",
        "intermediate": "p2_developing",
        "senior": "p3_career",
        "lead": "p4_advanced",
        "principal": "p5_principal",
    }
)
_NEW_TO_LEGACY: Mapping[str, str] = MappingProxyType({new: old for old, new in _LEGACY_TO_NEW.items()})

# legacy key -> SubCompetency column holding its criteria
_LEGACY_FIELDS: Mapping[str, str] = MappingProxyType({old: f"{old}_level" for old in _LEGACY_TO_NEW})


def coerce_role_type(role_type) -> RoleType:
    """Unknown or missing role types are treated as IC."""
    if isinstance(role_type, RoleType):
        return role_type
    try:
        return RoleType(str(role_type).strip().lower())
    except ValueError:
        return RoleType.IC


def default_level_defs(role_type) -> tuple[LevelDef, ...]:
    if coerce_role_type(role_type) is RoleType.MANAGEMENT:
        return _MANAGEMENT_LEVELS
    return _IC_LEVELS


def key_mapping(direction: KeyDirection) -> Mapping[str, str]:
    if direction is KeyDirection.NEW_TO_LEGACY:
        return _NEW_TO_LEGACY
    return _LEGACY_TO_NEW


def translate_key(key: str) -> str | None:
    """Map a level key through whichever table knows it, else None."""
    return _NEW_TO_LEGACY.get(key) or _LEGACY_TO_NEW.get(key)


def legacy_level_keys() -> tuple[str, ...]:
    return tuple(_LEGACY_TO_NEW)


def legacy_field_for(key: str) -> str | None:
    return _LEGACY_FIELDS.get(key)
