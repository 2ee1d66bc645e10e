"""Tests for examcoach.tools.schedule."""
from datetime import date, datetime, timedelta

import pytest

from examcoach.tools.schedule import generate_plan, session_count


@pytest.mark.parametrize("intensity,expected", [
    ("low", 2),
    ("medium", 4),
    ("high", 7),
    ("extreme", 3),
    ("", 3),
])
def test_session_count_per_intensity(intensity: str, expected: int) -> None:
    assert len(generate_plan("2024-06-10", intensity)) == expected
    assert session_count(intensity) == expected


def test_generate_plan_medium_scenario() -> None:
    plan = generate_plan("2024-06-10", "medium", 19)

    assert [s.when for s in plan] == [
        datetime(2024, 6, 6, 19, 0, 0),
        datetime(2024, 6, 7, 19, 0, 0),
        datetime(2024, 6, 8, 19, 0, 0),
        datetime(2024, 6, 9, 19, 0, 0),
    ]
    assert [s.focus for s in plan] == [f"Review round {i}" for i in range(1, 5)]
    assert all(not s.done and not s.notified and s.postpone_count == 0 for s in plan)


@pytest.mark.parametrize("intensity", ["low", "medium", "high", "other"])
def test_sessions_one_day_apart_ending_day_before_exam(intensity: str) -> None:
    exam_day = date(2024, 3, 2)
    plan = generate_plan(exam_day, intensity, 8)

    for earlier, later in zip(plan, plan[1:]):
        assert later.when - earlier.when == timedelta(hours=24)
    assert plan[-1].when.date() == exam_day - timedelta(days=1)


def test_default_hour_is_19() -> None:
    for session in generate_plan(date(2024, 1, 15), "high"):
        assert (session.when.hour, session.when.minute, session.when.second) == (19, 0, 0)


def test_crosses_month_boundary() -> None:
    plan = generate_plan("2024-03-02", "medium", 7)
    assert plan[0].when == datetime(2024, 2, 27, 7, 0)
    assert plan[-1].when == datetime(2024, 3, 1, 7, 0)


def test_past_exam_dates_are_not_rejected() -> None:
    plan = generate_plan("2000-01-01", "low")
    assert [s.when.date() for s in plan] == [date(1999, 12, 30), date(1999, 12, 31)]
