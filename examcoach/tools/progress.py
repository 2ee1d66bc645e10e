"""Progress and dashboard summaries derived from the store."""
from datetime import date, timedelta
from typing import Optional

from pydantic import BaseModel

from examcoach.models.exam import ExamRecord, SessionPlan
from examcoach.models.store import StudyStore


URGENT_DAYS = 2


class Progress(BaseModel):
    """Completed sessions across all exams."""
    total: int
    done: int
    percent: int


class ScheduledSession(BaseModel):
    """A session placed on a day, with the exam it belongs to."""
    exam_id: int
    subject: str
    index: int  # 0-based position in the exam plan
    session: SessionPlan
    urgent: bool = False


class DayPlan(BaseModel):
    day: date
    sessions: list[ScheduledSession]


def compute_progress(store: StudyStore) -> Progress:
    """Share of completed sessions, as a percentage rounded half up."""
    total = sum(len(e.plan) for e in store.exams)
    done = sum(1 for e in store.exams for s in e.plan if s.done)
    percent = int(done * 100 / total + 0.5) if total else 0
    return Progress(total=total, done=done, percent=percent)


def upcoming_exams(store: StudyStore, today: Optional[date] = None, days: int = 7) -> list[ExamRecord]:
    """Exams dated from today up to and including today + days."""
    if today is None:
        today = date.today()
    horizon = today + timedelta(days=days)
    return [e for e in store.exams if today <= e.exam_date <= horizon]


def is_urgent(exam: ExamRecord, day: date) -> bool:
    """True when the exam is 0-2 days after the given day."""
    return 0 <= (exam.exam_date - day).days <= URGENT_DAYS


def sessions_on(store: StudyStore, day: date) -> list[ScheduledSession]:
    """All sessions whose time falls on the given calendar day."""
    found = []
    for exam in store.exams:
        for index, session in enumerate(exam.plan):
            if session.when.date() == day:
                found.append(ScheduledSession(
                    exam_id=exam.id,
                    subject=exam.subject,
                    index=index,
                    session=session,
                    urgent=is_urgent(exam, day)
                ))
    return found


def weekly_plan(store: StudyStore, start: Optional[date] = None, days: int = 7) -> list[DayPlan]:
    """Sessions grouped per day for the days following start (inclusive)."""
    if start is None:
        start = date.today()
    return [
        DayPlan(day=start + timedelta(days=i), sessions=sessions_on(store, start + timedelta(days=i)))
        for i in range(days)
    ]
