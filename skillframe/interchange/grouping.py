"""
grouping.py
- Purpose: Arrange flat competency / sub-competency rows into export order.
"""

import logging
from collections import defaultdict
from typing import Iterable

logger = logging.getLogger("skillframe.interchange.grouping")


def group_framework(competencies: Iterable, sub_competencies: Iterable) -> list[tuple[object, list]]:
    """
    Competencies by order_index, each with its own sub-competencies by order_index.
    Sub-competencies pointing at a competency that isn't in the list are left out.
    """
    comps = sorted(competencies, key=lambda c: c.order_index)
    by_parent: dict = defaultdict(list)
    for sub in sub_competencies:
        by_parent[sub.competency_id].append(sub)

    orphans = set(by_parent) - {c.id for c in comps}
    if orphans:
        logger.warning("interchange.orphan_sub_competencies", extra={"competency_ids": [str(o) for o in orphans]})

    return [(comp, sorted(by_parent.get(comp.id, []), key=lambda s: s.order_index)) for comp in comps]
