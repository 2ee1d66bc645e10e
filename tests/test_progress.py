"""Tests for examcoach.tools.progress."""
from datetime import date

from examcoach.models.store import StudyStore
from examcoach.tools.exams import add_exam, mark_session_done
from examcoach.tools.progress import compute_progress, sessions_on, upcoming_exams, weekly_plan


def test_progress_empty_store() -> None:
    progress = compute_progress(StudyStore())
    assert (progress.total, progress.done, progress.percent) == (0, 0, 0)


def test_progress_rounds_half_up() -> None:
    store = StudyStore()
    low = add_exam(store, "Math", "2024-06-10", intensity="low")
    add_exam(store, "Art", "2024-06-10", intensity="low")
    add_exam(store, "Bio", "2024-06-10", intensity="high")
    add_exam(store, "Geo", "2024-06-10", intensity="weird")
    mark_session_done(store, low.id, 0)

    progress = compute_progress(store)
    # 1 of 14 sessions
    assert progress.total == 14
    assert progress.done == 1
    assert progress.percent == 7

    store2 = StudyStore()
    exam = add_exam(store2, "Math", "2024-06-10", intensity="low")
    mark_session_done(store2, exam.id, 0)
    assert compute_progress(store2).percent == 50


def test_upcoming_exams_within_seven_days() -> None:
    store = StudyStore()
    add_exam(store, "Today", "2024-06-01")
    add_exam(store, "Edge", "2024-06-08")
    add_exam(store, "Too far", "2024-06-09")
    add_exam(store, "Past", "2024-05-31")

    subjects = [e.subject for e in upcoming_exams(store, today=date(2024, 6, 1))]
    assert subjects == ["Today", "Edge"]


def test_sessions_on_day_with_urgency() -> None:
    store = StudyStore()
    add_exam(store, "Math", "2024-06-10", intensity="medium")  # 6th..9th
    add_exam(store, "Art", "2024-06-20", intensity="low")  # 18th, 19th

    on_8th = sessions_on(store, date(2024, 6, 8))
    assert [(s.subject, s.index, s.urgent) for s in on_8th] == [("Math", 2, True)]

    on_6th = sessions_on(store, date(2024, 6, 6))
    assert on_6th[0].urgent is False

    assert sessions_on(store, date(2024, 6, 12)) == []


def test_weekly_plan_covers_days() -> None:
    store = StudyStore()
    add_exam(store, "Math", "2024-06-10", intensity="medium")

    week = weekly_plan(store, start=date(2024, 6, 5))

    assert [d.day for d in week][0] == date(2024, 6, 5)
    assert len(week) == 7
    assert [len(d.sessions) for d in week] == [0, 1, 1, 1, 1, 0, 0]
