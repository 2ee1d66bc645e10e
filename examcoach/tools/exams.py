"""Exam operations on a StudyStore.

These functions mutate the store in memory. Saving is left to the caller
(CLI or agent tool), which should call save_store after each mutation.
Completed sessions are guarded here; the postponement tracker itself
does not look at the done flag.
"""
import logging
from datetime import date
from typing import Optional

from pydantic import BaseModel

from examcoach.models.exam import ExamRecord, SessionPlan
from examcoach.models.store import StudyStore
from examcoach.tools.gamification import award_points, POINTS_ADD_EXAM, POINTS_SESSION_DONE
from examcoach.tools.ids import generate_id
from examcoach.tools.postpone import (
    DEFAULT_SNOOZE_MINUTES,
    TimeSuggestion,
    accept_suggestion,
    needs_suggestion,
    reject_suggestion,
    snooze,
    suggest_better_time,
)
from examcoach.tools.schedule import generate_plan


logger = logging.getLogger(__name__)


class SnoozeOutcome(BaseModel):
    """Result of a snooze request made through the store."""
    moved: bool
    postpone_count: int
    suggestion: Optional[TimeSuggestion] = None


def add_exam(
    store: StudyStore,
    subject: str,
    exam_date: date | str,
    content: str = "",
    intensity: str = "medium",
    preferred_hour: Optional[int] = None
) -> ExamRecord:
    """
    Create an exam with its generated plan and append it to the store.

    Args:
        store: Store to add to
        subject: Subject name
        exam_date: Exam day (date or "YYYY-MM-DD")
        content: Free-text notes about what the exam covers
        intensity: "low", "medium" or "high"
        preferred_hour: Session hour; defaults to the profile's preferred hour

    Returns:
        The new ExamRecord
    """
    if isinstance(exam_date, str):
        exam_date = date.fromisoformat(exam_date)
    if preferred_hour is None:
        preferred_hour = store.profile.preferred_hour

    exam = ExamRecord(
        id=generate_id(e.id for e in store.exams),
        subject=subject,
        exam_date=exam_date,
        content=content.strip(),
        intensity=intensity,
        plan=generate_plan(exam_date, intensity, preferred_hour)
    )
    store.exams.append(exam)
    logger.info(f"Added exam {exam.id} ({exam.subject}, {exam.exam_date}) with {len(exam.plan)} sessions")

    award_points(store.profile, POINTS_ADD_EXAM, "Add exam")
    return exam


def get_exam(store: StudyStore, exam_id: int) -> Optional[ExamRecord]:
    """Find an exam by ID."""
    for exam in store.exams:
        if exam.id == exam_id:
            return exam
    return None


def delete_exam(store: StudyStore, exam_id: int) -> bool:
    """Remove an exam and its sessions. Returns False if it did not exist."""
    before = len(store.exams)
    store.exams = [e for e in store.exams if e.id != exam_id]
    removed = len(store.exams) < before
    if removed:
        logger.info(f"Deleted exam {exam_id}")
    return removed


def regenerate_plan(
    store: StudyStore,
    exam_id: int,
    preferred_hour: Optional[int] = None
) -> Optional[ExamRecord]:
    """Replace an exam's sessions with a freshly generated plan (same intensity)."""
    exam = get_exam(store, exam_id)
    if exam is None:
        return None
    if preferred_hour is None:
        preferred_hour = store.profile.preferred_hour

    exam.plan = generate_plan(exam.exam_date, exam.intensity, preferred_hour)
    logger.info(f"Regenerated plan for exam {exam_id}")
    return exam


def get_session(store: StudyStore, exam_id: int, index: int) -> Optional[SessionPlan]:
    """Session at a 0-based position of an exam's plan."""
    exam = get_exam(store, exam_id)
    if exam is None:
        return None
    return exam.session(index)


def mark_session_done(store: StudyStore, exam_id: int, index: int) -> Optional[SessionPlan]:
    """
    Mark a session completed. Points are only awarded the first time.

    Returns:
        The session, or None if the exam or index does not exist
    """
    session = get_session(store, exam_id, index)
    if session is None:
        return None

    if not session.done:
        session.done = True
        award_points(store.profile, POINTS_SESSION_DONE, "Complete study session")
    return session


def snooze_session(
    store: StudyStore,
    exam_id: int,
    index: int,
    delay_minutes: int = DEFAULT_SNOOZE_MINUTES
) -> Optional[SnoozeOutcome]:
    """
    Snooze a session and attach a suggestion once the threshold is reached.

    Completed sessions are left untouched (moved=False).

    Returns:
        SnoozeOutcome, or None if the exam or index does not exist
    """
    session = get_session(store, exam_id, index)
    if session is None:
        return None

    if session.done:
        logger.warning(f"Session {index} of exam {exam_id} is done; not snoozing")
        return SnoozeOutcome(moved=False, postpone_count=session.postpone_count)

    suggestion = None
    if snooze(session, delay_minutes):
        suggestion = suggest_better_time(session, store.profile.preferred_hour)

    return SnoozeOutcome(
        moved=True,
        postpone_count=session.postpone_count,
        suggestion=suggestion
    )


def accept_session_suggestion(
    store: StudyStore,
    exam_id: int,
    index: int,
    preferred_hour: Optional[int] = None
) -> Optional[SessionPlan]:
    """
    Accept the better-time proposal for a session.

    Only applies while the threshold condition holds and the session is
    not done; otherwise the session is returned unchanged.
    """
    session = get_session(store, exam_id, index)
    if session is None:
        return None
    if session.done or not needs_suggestion(session):
        return session

    if preferred_hour is None:
        preferred_hour = store.profile.preferred_hour
    accept_suggestion(session, suggest_better_time(session, preferred_hour))
    return session


def reject_session_suggestion(store: StudyStore, exam_id: int, index: int) -> Optional[SessionPlan]:
    """Reject the proposal; the session keeps its time and count."""
    session = get_session(store, exam_id, index)
    if session is None:
        return None
    if needs_suggestion(session):
        reject_suggestion(session, suggest_better_time(session, store.profile.preferred_hour))
    return session
