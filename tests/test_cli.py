"""Tests for the examcoach.cli entry points."""
from datetime import datetime
from pathlib import Path

import pytest

from examcoach.cli import add_exam, flashcards, reminders, show_plan, update_session
from examcoach.tools.store_io import load_store


def test_add_exam_then_snooze_and_accept(tmp_path: Path) -> None:
    store_path = tmp_path / "examcoach.json"
    add_exam.main(["--store", str(store_path), "Math", "2024-06-10", "--intensity", "low"])

    store = load_store(store_path)
    exam_id = store.exams[0].id
    assert len(store.exams[0].plan) == 2

    for _ in range(3):
        update_session.main(["--store", str(store_path), str(exam_id), "1", "--snooze", "--accept", "yes"])

    session = load_store(store_path).exams[0].plan[0]
    assert session.when == datetime(2024, 6, 8, 19, 0)
    assert session.postpone_count == 0


def test_reject_keeps_snoozed_time(tmp_path: Path) -> None:
    store_path = tmp_path / "examcoach.json"
    add_exam.main(["--store", str(store_path), "Math", "2024-06-10", "--intensity", "low"])
    exam_id = load_store(store_path).exams[0].id

    for _ in range(3):
        update_session.main(["--store", str(store_path), str(exam_id), "1", "--snooze", "--accept", "no"])

    session = load_store(store_path).exams[0].plan[0]
    assert session.when == datetime(2024, 6, 8, 20, 30)
    assert session.postpone_count == 3


def test_mark_done(tmp_path: Path) -> None:
    store_path = tmp_path / "examcoach.json"
    add_exam.main(["--store", str(store_path), "Math", "2024-06-10"])
    exam_id = load_store(store_path).exams[0].id

    update_session.main(["--store", str(store_path), str(exam_id), "2", "--done"])

    store = load_store(store_path)
    assert store.exams[0].plan[1].done is True
    assert store.profile.points == 15


def test_invalid_input_exits(tmp_path: Path) -> None:
    store_path = tmp_path / "examcoach.json"
    with pytest.raises(SystemExit):
        add_exam.main(["--store", str(store_path), "Math", "June 10"])
    with pytest.raises(SystemExit):
        update_session.main(["--store", str(store_path), "1", "1", "--done"])


def test_reminders_and_flashcards(tmp_path: Path) -> None:
    store_path = tmp_path / "examcoach.json"
    reminders.main(["--store", str(store_path), "add", "Review", "2024-06-06T14:00"])
    reminders.main(["--store", str(store_path), "list"])
    reminder_id = load_store(store_path).reminders[0].id
    reminders.main(["--store", str(store_path), "snooze", str(reminder_id)])
    assert load_store(store_path).reminders[0].when == datetime(2024, 6, 6, 14, 10)

    flashcards.main(["--store", str(store_path), "add", "Math", "Ch1", "2+2?", "4"])
    assert len(load_store(store_path).decks[0].cards) == 1

    show_plan.main(["--store", str(store_path)])


def test_reminder_with_utc_offset(tmp_path: Path) -> None:
    store_path = tmp_path / "examcoach.json"
    reminders.main(["--store", str(store_path), "add", "Review", "2024-06-06T12:00:00Z"])
    reminders.main(["--store", str(store_path), "list"])
    assert load_store(store_path).reminders[0].when.tzinfo is None

    with pytest.raises(SystemExit):
        reminders.main(["--store", str(store_path), "add", "Review", "tomorrow"])
