"""One pass of the periodic due check for reminders and sessions."""
import logging
from datetime import datetime
from typing import Literal, Optional

from pydantic import BaseModel

from examcoach.models.store import StudyStore
from examcoach.tools.gamification import award_points, POINTS_REMINDER_TRIGGER


logger = logging.getLogger(__name__)

DUE_WINDOW_SECONDS = 30


class DueItem(BaseModel):
    """Something a notifier should present now."""
    kind: Literal["reminder", "session"]
    title: str
    body: str
    when: datetime
    reminder_id: Optional[int] = None
    exam_id: Optional[int] = None
    session_index: Optional[int] = None
    voice: str = ""


def _within_window(when: datetime, now: datetime, window_seconds: int) -> bool:
    return abs((when - now).total_seconds()) < window_seconds


def collect_due(
    store: StudyStore,
    now: Optional[datetime] = None,
    window_seconds: int = DUE_WINDOW_SECONDS
) -> list[DueItem]:
    """
    Find reminders and sessions due around now and flag them notified.

    A reminder is due when its time is within window_seconds of now and it
    has not been notified; each one awards a point. Sessions follow the
    same rule but are skipped once done.

    Args:
        store: Store to scan (mutated: notified flags, points)
        now: Reference time, defaults to the current local time
        window_seconds: Half-width of the due window

    Returns:
        Due items in the order they were found
    """
    if now is None:
        now = datetime.now()

    due = []

    for reminder in store.reminders:
        if reminder.notified or not _within_window(reminder.when, now, window_seconds):
            continue
        reminder.notified = True
        due.append(DueItem(
            kind="reminder",
            title=reminder.title,
            body=reminder.message or "Time to study!",
            when=reminder.when,
            reminder_id=reminder.id,
            voice=reminder.voice
        ))
        award_points(store.profile, POINTS_REMINDER_TRIGGER, "Reminder trigger")

    for exam in store.exams:
        for index, session in enumerate(exam.plan):
            if session.notified or session.done:
                continue
            if not _within_window(session.when, now, window_seconds):
                continue
            session.notified = True
            due.append(DueItem(
                kind="session",
                title=f"Study: {exam.subject}",
                body=session.focus,
                when=session.when,
                exam_id=exam.id,
                session_index=index
            ))

    if due:
        logger.info(f"{len(due)} item(s) due at {now.isoformat()}")
    return due
