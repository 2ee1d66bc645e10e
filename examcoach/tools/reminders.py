"""Reminder operations on a StudyStore (in-memory; caller saves)."""
import logging
from datetime import datetime
from typing import Optional

from examcoach.models.reminder import Reminder
from examcoach.models.store import StudyStore
from examcoach.tools.exams import SnoozeOutcome
from examcoach.tools.ids import generate_id
from examcoach.tools.postpone import accept_suggestion, needs_suggestion, snooze, suggest_better_time


logger = logging.getLogger(__name__)

REMINDER_SNOOZE_MINUTES = 10


def add_reminder(
    store: StudyStore,
    title: str,
    when: datetime | str,
    message: str = "",
    voice: str = ""
) -> Reminder:
    """Create a reminder and append it to the store.

    String times are parsed by the model, so offsets and a trailing Z are accepted.
    """
    reminder = Reminder(
        id=generate_id(r.id for r in store.reminders),
        title=title,
        when=when,
        message=message.strip(),
        voice=voice.strip()
    )
    store.reminders.append(reminder)
    logger.info(f"Added reminder {reminder.id} at {reminder.when.isoformat()}")
    return reminder


def get_reminder(store: StudyStore, reminder_id: int) -> Optional[Reminder]:
    for reminder in store.reminders:
        if reminder.id == reminder_id:
            return reminder
    return None


def list_reminders(store: StudyStore) -> list[Reminder]:
    """Reminders ordered by time."""
    return sorted(store.reminders, key=lambda r: r.when)


def delete_reminder(store: StudyStore, reminder_id: int) -> bool:
    before = len(store.reminders)
    store.reminders = [r for r in store.reminders if r.id != reminder_id]
    return len(store.reminders) < before


def snooze_reminder(
    store: StudyStore,
    reminder_id: int,
    minutes: int = REMINDER_SNOOZE_MINUTES
) -> Optional[SnoozeOutcome]:
    """Snooze a reminder; a suggestion is attached from the third snooze on."""
    reminder = get_reminder(store, reminder_id)
    if reminder is None:
        return None

    suggestion = None
    if snooze(reminder, minutes):
        suggestion = suggest_better_time(reminder, store.profile.preferred_hour)
    return SnoozeOutcome(moved=True, postpone_count=reminder.postpone_count, suggestion=suggestion)


def accept_reminder_suggestion(
    store: StudyStore,
    reminder_id: int,
    preferred_hour: Optional[int] = None
) -> Optional[Reminder]:
    """Move a frequently snoozed reminder to the preferred hour of its day."""
    reminder = get_reminder(store, reminder_id)
    if reminder is None:
        return None
    if not needs_suggestion(reminder):
        return reminder

    if preferred_hour is None:
        preferred_hour = store.profile.preferred_hour
    accept_suggestion(reminder, suggest_better_time(reminder, preferred_hour))
    return reminder
