"""Tests for examcoach.tools.store_io."""
from datetime import datetime
from pathlib import Path

from examcoach.models.store import StudyStore
from examcoach.tools.exams import add_exam
from examcoach.tools.store_io import default_store_path, load_store, open_store, save_store


def test_load_missing_file_returns_none(tmp_path: Path) -> None:
    assert load_store(tmp_path / "missing.json") is None


def test_load_invalid_json_returns_none(tmp_path: Path) -> None:
    path = tmp_path / "examcoach.json"
    path.write_text("{not json")
    assert load_store(path) is None


def test_open_store_starts_fresh(tmp_path: Path) -> None:
    store = open_store(tmp_path / "examcoach.json")
    assert store.exams == []
    assert store.profile.points == 0
    assert store.profile.preferred_hour == 19


def test_save_and_load_preserves_sessions(tmp_path: Path) -> None:
    path = tmp_path / "state" / "examcoach.json"
    store = StudyStore()
    exam = add_exam(store, "Math", "2024-06-10", intensity="medium")
    exam.plan[0].postpone_count = 2

    save_store(store, path)
    loaded = load_store(path)

    assert loaded is not None
    assert loaded.saved_at is not None
    assert loaded.exams[0].plan[0].when == datetime(2024, 6, 6, 19, 0)
    assert loaded.exams[0].plan[0].postpone_count == 2
    assert loaded.exams[0].exam_date.isoformat() == "2024-06-10"
    assert not path.with_suffix(".tmp").exists()


def test_saved_timestamps_are_iso(tmp_path: Path) -> None:
    path = tmp_path / "examcoach.json"
    store = StudyStore()
    add_exam(store, "Math", "2024-06-10", intensity="low")
    save_store(store, path)

    text = path.read_text()
    assert '"2024-06-08T19:00:00"' in text
    assert '"2024-06-10"' in text


def test_default_store_path_uses_env(tmp_path: Path, monkeypatch) -> None:
    monkeypatch.setenv("EXAMCOACH_STATE_DIR", str(tmp_path))
    assert default_store_path() == tmp_path / "examcoach.json"


def test_default_store_path_without_env(monkeypatch) -> None:
    monkeypatch.delenv("EXAMCOACH_STATE_DIR", raising=False)
    path = default_store_path()
    assert path.name == "examcoach.json"
    assert path.parent.name == "state"
