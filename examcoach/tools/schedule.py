"""Generate review sessions counting backward from an exam date."""
from datetime import date, datetime, time, timedelta

from examcoach.models.exam import SessionPlan


SESSION_COUNTS = {"low": 2, "medium": 4, "high": 7}
DEFAULT_SESSION_COUNT = 3
DEFAULT_PREFERRED_HOUR = 19


def session_count(intensity: str) -> int:
    """Number of sessions for an intensity; unknown values get the default."""
    return SESSION_COUNTS.get(intensity, DEFAULT_SESSION_COUNT)


def generate_plan(
    exam_date: date | str,
    intensity: str,
    preferred_hour: int = DEFAULT_PREFERRED_HOUR
) -> list[SessionPlan]:
    """
    Build the review sessions for an exam.

    Sessions fall on consecutive days ending the day before the exam,
    one per day in ascending order, all at preferred_hour:00:00. Nothing
    checks that the exam is far enough away for the dates to be in the
    future.

    Args:
        exam_date: Exam day as a date or an ISO "YYYY-MM-DD" string
        intensity: "low", "medium" or "high"; anything else gives 3 sessions
        preferred_hour: Clock hour used for every session

    Returns:
        List of fresh SessionPlan objects
    """
    if isinstance(exam_date, str):
        exam_date = date.fromisoformat(exam_date)

    count = session_count(intensity)
    clock = time(hour=preferred_hour)

    sessions = []
    for i in range(1, count + 1):
        day = exam_date - timedelta(days=count - i + 1)
        sessions.append(SessionPlan(
            when=datetime.combine(day, clock),
            focus=f"Review round {i}"
        ))
    return sessions
