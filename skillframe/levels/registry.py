"""
registry.py
- Purpose: The ordered level sequence of a role and the navigation/score
  helpers built on it.
- Design: Pure functions. `levels` is any iterable of objects exposing
  `key`, `label` and `order_index` (LevelDef defaults or RoleLevel rows).
- Read paths only: unknown keys degrade to None / default scores, never raise.
"""

from typing import Iterable, Sequence

from skillframe.constants.levels import LevelDef, default_level_defs

DEFAULT_BASE_SCORE = 4
CHART_HEADROOM = 4
_MIN_BASE_SCORE = 2


def default_levels_for(role_type) -> tuple[LevelDef, ...]:
    return default_level_defs(role_type)


def ordered(levels: Iterable) -> list:
    return sorted(levels, key=lambda lvl: lvl.order_index)


def level_keys(levels: Iterable) -> list[str]:
    return [lvl.key for lvl in ordered(levels)]


def level_labels(levels: Iterable) -> list[str]:
    return [lvl.label for lvl in ordered(levels)]


def level_options(levels: Iterable) -> list[dict[str, str]]:
    return [{"key": lvl.key, "label": lvl.label} for lvl in ordered(levels)]


def _position(keys: Sequence[str], key: str) -> int:
    try:
        return keys.index(key)
    except ValueError:
        return -1


def _clamp(idx: int, size: int) -> int:
    return min(max(idx, 0), size - 1)


def level_below(levels: Iterable, key: str) -> str | None:
    keys = level_keys(levels)
    idx = _position(keys, key)
    return keys[idx - 1] if idx > 0 else None


def level_above(levels: Iterable, key: str) -> str | None:
    keys = level_keys(levels)
    idx = _position(keys, key)
    return keys[idx + 1] if 0 <= idx < len(keys) - 1 else None


def level_n_below(levels: Iterable, key: str, n: int) -> str | None:
    keys = level_keys(levels)
    idx = _position(keys, key)
    if idx < 0:
        return None
    return keys[_clamp(idx - n, len(keys))]


def level_n_above(levels: Iterable, key: str, n: int) -> str | None:
    keys = level_keys(levels)
    idx = _position(keys, key)
    if idx < 0:
        return None
    return keys[_clamp(idx + n, len(keys))]


def base_score_for(levels: Iterable, key: str) -> int:
    for lvl in levels:
        if lvl.key == key:
            return (lvl.order_index + 1) * 2
    return DEFAULT_BASE_SCORE


def build_base_scores(levels: Iterable) -> dict[str, int]:
    return {lvl.key: (lvl.order_index + 1) * 2 for lvl in levels}


def max_chart_scale(levels: Iterable, member_level_keys: Iterable[str]) -> int:
    """Upper bound of a chart covering every member level plus headroom (min 6)."""
    scores = build_base_scores(levels)
    top = _MIN_BASE_SCORE
    for key in member_level_keys:
        top = max(top, scores.get((key or "").lower(), DEFAULT_BASE_SCORE))
    return top + CHART_HEADROOM


def short_code(key: str) -> str:
    """`p3_career` -> `p3`."""
    return key.split("_", 1)[0]


def label_to_key(levels: Iterable, label: str) -> str:
    wanted = label.lower()
    for lvl in levels:
        if lvl.label.lower() == wanted:
            return lvl.key
    return wanted


def key_to_label(levels: Iterable, key: str) -> str:
    for lvl in levels:
        if lvl.key == key:
            return lvl.label
    return key[:1].upper() + key[1:]
