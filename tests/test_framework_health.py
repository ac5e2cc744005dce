import uuid

import pytest

from skillframe.levels.health import completion_pct, framework_health, health_status
from skillframe.levels.registry import default_levels_for
from tests.utils import build_competency, build_sub

IC = default_levels_for("ic")


def items(n: int) -> list[str]:
    return [f"criterion {i}" for i in range(n)]


def test_report_counts_gaps_and_uneven_rows():
    comp = build_competency(uuid.uuid4(), "Craft", 0)
    full = build_sub(
        uuid.uuid4(),
        comp.id,
        "Design",
        0,
        {"p1_entry": items(1), "p2_developing": items(1), "p3_career": items(1), "p4_advanced": items(1), "p5_principal": items(6)},
    )
    legacy_only = build_sub(uuid.uuid4(), comp.id, "Testing", 1, senior_level=["Writes integration tests"])

    report = framework_health([comp], [full, legacy_only], IC)

    assert report.status == "partial"
    assert report.competencies == 1
    assert report.sub_competencies == 2
    assert report.level_slots == 10
    assert report.filled_slots == 6
    assert report.completion_pct == 60

    assert len(report.gaps) == 1
    gap = report.gaps[0]
    assert gap.sub_competency_title == "Testing"
    assert gap.competency_title == "Craft"
    assert gap.empty_levels == ["p1_entry", "p2_developing", "p4_advanced", "p5_principal"]

    assert [(u.sub_competency_title, u.min, u.max) for u in report.uneven] == [("Design", 1, 6)]
    assert report.uneven[0].counts["p5_principal"] == 6


@pytest.mark.parametrize(
    "small,large,flagged",
    [
        (2, 6, True),
        (1, 4, False),  # ratio met, spread too small
        (3, 8, False),  # spread met, ratio too small
    ],
)
def test_uneven_threshold(small, large, flagged):
    comp = build_competency(uuid.uuid4(), "Craft", 0)
    sub = build_sub(uuid.uuid4(), comp.id, "Design", 0, {"p1_entry": items(small), "p3_career": items(large)})

    report = framework_health([comp], [sub], IC)

    assert bool(report.uneven) is flagged


def test_single_filled_level_is_never_uneven():
    comp = build_competency(uuid.uuid4(), "Craft", 0)
    sub = build_sub(uuid.uuid4(), comp.id, "Design", 0, {"p1_entry": items(9)})
    assert framework_health([comp], [sub], IC).uneven == []


def test_fully_graded_framework_is_complete():
    comp = build_competency(uuid.uuid4(), "Craft", 0)
    sub = build_sub(uuid.uuid4(), comp.id, "Design", 0, {lvl.key: items(2) for lvl in IC})

    report = framework_health([comp], [sub], IC)

    assert report.status == "complete"
    assert report.completion_pct == 100
    assert report.gaps == []


def test_empty_framework():
    report = framework_health([], [], IC)
    assert report.status == "complete"
    assert report.level_slots == 0
    assert report.completion_pct == 0


@pytest.mark.parametrize("gap_count,status", [(0, "complete"), (1, "partial"), (3, "partial"), (4, "incomplete")])
def test_health_status(gap_count, status):
    assert health_status(gap_count) == status


@pytest.mark.parametrize("filled,total,pct", [(1, 8, 13), (1, 3, 33), (2, 3, 67), (0, 5, 0), (0, 0, 0)])
def test_completion_pct_rounds_half_up(filled, total, pct):
    assert completion_pct(filled, total) == pct
