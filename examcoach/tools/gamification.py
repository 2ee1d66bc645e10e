"""Points and badges."""
import logging

from examcoach.models.profile import UserProfile


logger = logging.getLogger(__name__)

POINTS_ADD_EXAM = 10
POINTS_SESSION_DONE = 5
POINTS_REMINDER_TRIGGER = 1

# (points needed, badge name), lowest first
BADGES = [
    (50, "Starter"),
    (200, "Pro Student"),
]


def award_points(profile: UserProfile, amount: int, reason: str) -> list[str]:
    """
    Add points to the profile and unlock any badges now reached.

    Returns:
        Names of badges unlocked by this award
    """
    profile.points += amount
    logger.info(f"+{amount} points ({reason}), total {profile.points}")

    unlocked = []
    for threshold, badge in BADGES:
        if profile.points >= threshold and badge not in profile.badges:
            profile.badges.append(badge)
            unlocked.append(badge)
            logger.info(f"Badge unlocked: {badge}")
    return unlocked
