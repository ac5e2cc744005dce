"""
health.py
- Purpose: Coverage report for a role's framework against its effective levels.
- Counts go through the criteria resolver, so legacy-only sub-competencies
  are graded the same way they are displayed.

A sub-competency has a gap at every level that resolves to no criteria. It is
"uneven" when its filled levels differ wildly in size (largest >= 3x the
smallest and at least 4 apart).
"""

from typing import Iterable

from skillframe.interchange.grouping import group_framework
from skillframe.levels.criteria import resolve
from skillframe.levels.registry import ordered
from skillframe.schemas.framework_schema import FrameworkHealthReport, LevelGap, UnevenCriteria

PARTIAL_GAP_LIMIT = 3
UNEVEN_RATIO = 3
UNEVEN_SPREAD = 4


def completion_pct(filled: int, total: int) -> int:
    """Whole percent, halves rounded up; 0 for an empty framework."""
    if total <= 0:
        return 0
    return (filled * 100 + total // 2) // total


def health_status(gap_count: int) -> str:
    if gap_count == 0:
        return "complete"
    if gap_count <= PARTIAL_GAP_LIMIT:
        return "partial"
    return "incomplete"


def _is_uneven(counts: Iterable[int]) -> tuple[bool, int, int]:
    filled = [c for c in counts if c > 0]
    if len(filled) < 2:
        return False, 0, 0
    lo, hi = min(filled), max(filled)
    return hi >= lo * UNEVEN_RATIO and hi - lo >= UNEVEN_SPREAD, lo, hi


def framework_health(competencies: Iterable, sub_competencies: Iterable, levels: Iterable) -> FrameworkHealthReport:
    level_keys = [lvl.key for lvl in ordered(levels)]
    grouped = group_framework(competencies, sub_competencies)

    gaps: list[LevelGap] = []
    uneven: list[UnevenCriteria] = []
    sub_total = 0
    filled_slots = 0

    for comp, subs in grouped:
        for sub in subs:
            sub_total += 1
            counts = {key: len(resolve(sub, key)) for key in level_keys}
            filled_slots += sum(1 for c in counts.values() if c > 0)

            empty = [key for key, c in counts.items() if c == 0]
            if empty:
                gaps.append(
                    LevelGap(
                        competency_title=comp.title,
                        sub_competency_id=sub.id,
                        sub_competency_title=sub.title,
                        empty_levels=empty,
                    )
                )

            flagged, lo, hi = _is_uneven(counts.values())
            if flagged:
                uneven.append(
                    UnevenCriteria(
                        competency_title=comp.title,
                        sub_competency_id=sub.id,
                        sub_competency_title=sub.title,
                        counts=counts,
                        min=lo,
                        max=hi,
                    )
                )

    slots = sub_total * len(level_keys)
    return FrameworkHealthReport(
        status=health_status(len(gaps)),
        competencies=len(grouped),
        sub_competencies=sub_total,
        level_slots=slots,
        filled_slots=filled_slots,
        completion_pct=completion_pct(filled_slots, slots),
        gaps=gaps,
        uneven=uneven,
    )
