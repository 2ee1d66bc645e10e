"""Tests for model validation."""
from datetime import datetime, timezone

import pytest
from pydantic import ValidationError

from examcoach.models.exam import ExamRecord, SessionPlan
from examcoach.models.profile import UserProfile
from examcoach.models.store import StudyStore


def test_negative_postpone_count_rejected() -> None:
    with pytest.raises(ValidationError):
        SessionPlan(when=datetime(2024, 1, 1, 19), focus="x", postpone_count=-1)


def test_preferred_hour_range() -> None:
    assert UserProfile(preferred_hour=0).preferred_hour == 0
    with pytest.raises(ValidationError):
        UserProfile(preferred_hour=24)


def test_exam_session_lookup() -> None:
    exam = ExamRecord(
        id=1,
        subject="Math",
        exam_date="2024-06-10",
        plan=[SessionPlan(when=datetime(2024, 6, 9, 19), focus="Review round 1")]
    )
    assert exam.session(0).focus == "Review round 1"
    assert exam.session(1) is None
    assert exam.session(-1) is None


def test_aware_session_time_loaded_naive() -> None:
    plan = SessionPlan(when="2024-06-09T12:00:00Z", focus="Review round 1")
    expected = datetime(2024, 6, 9, 12, 0, tzinfo=timezone.utc).astimezone().replace(tzinfo=None)
    assert plan.when == expected
    assert plan.when.tzinfo is None

    store = StudyStore.model_validate_json(
        '{"reminders": [{"id": 1, "title": "Review", "when": "2024-06-09T19:00:00+07:00"}]}'
    )
    assert store.reminders[0].when == expected


def test_profile_has_no_mood_and_old_files_load() -> None:
    assert "mood" not in UserProfile.model_fields
    profile = UserProfile(**{"points": 3, "mood": "tired"})
    assert profile.points == 3
