"""Tests for examcoach.tools.gamification."""
from examcoach.models.profile import UserProfile
from examcoach.tools.gamification import award_points


def test_badges_unlock_once() -> None:
    profile = UserProfile()

    assert award_points(profile, 45, "test") == []
    assert award_points(profile, 5, "test") == ["Starter"]
    assert award_points(profile, 10, "test") == []
    assert award_points(profile, 500, "test") == ["Pro Student"]

    assert profile.points == 560
    assert profile.badges == ["Starter", "Pro Student"]


def test_big_award_unlocks_both() -> None:
    profile = UserProfile()
    assert award_points(profile, 250, "test") == ["Starter", "Pro Student"]
