"""ADK tool wrappers for Exam Coach.

Each tool loads the store, calls the matching operation, saves when
something changed and returns a status dict the agent can read.
"""
from datetime import date, datetime
import logging
from typing import Literal, Optional

# Set up logging
logger = logging.getLogger(__name__)
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)

from examcoach.tools.store_io import default_store_path, open_store, save_store
from examcoach.tools.exams import (
    accept_session_suggestion,
    add_exam,
    delete_exam,
    get_exam,
    mark_session_done,
    reject_session_suggestion,
    snooze_session,
)
from examcoach.tools.reminders import add_reminder, get_reminder, snooze_reminder, accept_reminder_suggestion
from examcoach.tools.due_check import collect_due
from examcoach.tools.progress import compute_progress, upcoming_exams, weekly_plan


def _session_info(exam_id: int, index: int, session) -> dict:
    return {
        "exam_id": exam_id,
        "session": index + 1,
        "when": session.when.isoformat(),
        "focus": session.focus,
        "done": session.done,
        "postpone_count": session.postpone_count,
    }


# ============================================================================
# PLANNER TOOLS
# ============================================================================

def get_current_date() -> dict:
    """
    Get today's date and time. Use this before scheduling anything relative
    to "today" or "tomorrow".

    Returns:
        dict with status, today (YYYY-MM-DD), now (ISO timestamp) and weekday
    """
    now = datetime.now()
    return {
        "status": "success",
        "today": now.date().isoformat(),
        "now": now.isoformat(timespec="seconds"),
        "weekday": now.strftime("%A"),
    }


def create_exam(
    subject: str,
    exam_date: str,
    intensity: Literal["low", "medium", "high"] = "medium",
    content: str = "",
    preferred_hour: Optional[int] = None
) -> dict:
    """
    Register an exam and generate its review sessions.

    Args:
        subject: Subject name
        exam_date: Exam date (YYYY-MM-DD)
        intensity: low (2 sessions), medium (4) or high (7)
        content: What the exam covers
        preferred_hour: Hour of day for sessions (0-23), default from profile

    Returns:
        dict with status, exam_id, sessions and message
    """
    try:
        store_path = default_store_path()
        store = open_store(store_path)

        exam = add_exam(
            store,
            subject=subject,
            exam_date=date.fromisoformat(exam_date),
            content=content,
            intensity=intensity,
            preferred_hour=preferred_hour
        )
        save_store(store, store_path)

        return {
            "status": "success",
            "exam_id": exam.id,
            "sessions": [_session_info(exam.id, i, s) for i, s in enumerate(exam.plan)],
            "message": f"Created {len(exam.plan)} review sessions for {exam.subject} before {exam.exam_date}"
        }

    except Exception as e:
        return {
            "status": "error",
            "message": f"Failed to create exam: {str(e)}"
        }


def list_exams() -> dict:
    """
    List all registered exams with their sessions.

    Returns:
        dict with status, exams, total_exams and message
    """
    try:
        store = open_store(default_store_path())
        exams = []
        for exam in store.exams:
            exams.append({
                "exam_id": exam.id,
                "subject": exam.subject,
                "exam_date": exam.exam_date.isoformat(),
                "intensity": exam.intensity,
                "sessions": [_session_info(exam.id, i, s) for i, s in enumerate(exam.plan)],
            })

        return {
            "status": "success",
            "exams": exams,
            "total_exams": len(exams),
            "message": f"Found {len(exams)} exam(s)"
        }

    except Exception as e:
        return {
            "status": "error",
            "exams": [],
            "message": f"Failed to list exams: {str(e)}"
        }


def remove_exam(exam_id: int) -> dict:
    """
    Delete an exam and its review sessions.

    Args:
        exam_id: Exam ID from list_exams

    Returns:
        dict with status and message
    """
    try:
        store_path = default_store_path()
        store = open_store(store_path)
        if not delete_exam(store, exam_id):
            return {"status": "error", "message": f"Exam {exam_id} not found"}
        save_store(store, store_path)
        return {"status": "success", "message": f"Deleted exam {exam_id}"}

    except Exception as e:
        return {
            "status": "error",
            "message": f"Failed to delete exam: {str(e)}"
        }


def complete_session(exam_id: int, session: int) -> dict:
    """
    Mark a review session as done.

    Args:
        exam_id: Exam ID
        session: Session number (1-based, as shown in list_exams)

    Returns:
        dict with status, session details, points and message
    """
    try:
        store_path = default_store_path()
        store = open_store(store_path)
        plan = mark_session_done(store, exam_id, session - 1)
        if plan is None:
            return {"status": "error", "message": f"Exam {exam_id} has no session {session}"}
        save_store(store, store_path)

        return {
            "status": "success",
            "session": _session_info(exam_id, session - 1, plan),
            "points": store.profile.points,
            "badges": store.profile.badges,
            "message": f"Marked '{plan.focus}' done"
        }

    except Exception as e:
        return {
            "status": "error",
            "message": f"Failed to complete session: {str(e)}"
        }


def postpone_session(exam_id: int, session: int, minutes: int = 30) -> dict:
    """
    Snooze a review session. After the third snooze a better time is
    suggested; ask the user, then call resolve_suggestion.

    Args:
        exam_id: Exam ID
        session: Session number (1-based)
        minutes: Delay in minutes (default 30)

    Returns:
        dict with status, session, suggestion (or None) and message
    """
    try:
        store_path = default_store_path()
        store = open_store(store_path)
        outcome = snooze_session(store, exam_id, session - 1, minutes)
        if outcome is None:
            return {"status": "error", "message": f"Exam {exam_id} has no session {session}"}
        if not outcome.moved:
            return {"status": "error", "message": "Session already completed"}
        save_store(store, store_path)

        plan = get_exam(store, exam_id).plan[session - 1]
        suggestion = None
        message = f"Snoozed to {plan.when:%Y-%m-%d %H:%M}"
        if outcome.suggestion is not None:
            suggestion = outcome.suggestion.proposed_when.isoformat()
            message += f". Postponed {outcome.postpone_count}x: suggest moving to {outcome.suggestion.proposed_when:%H:%M}"

        return {
            "status": "success",
            "session": _session_info(exam_id, session - 1, plan),
            "suggestion": suggestion,
            "message": message
        }

    except Exception as e:
        return {
            "status": "error",
            "message": f"Failed to snooze session: {str(e)}"
        }


def resolve_suggestion(exam_id: int, session: int, accept: bool) -> dict:
    """
    Accept or reject a better-time suggestion for a session.

    Args:
        exam_id: Exam ID
        session: Session number (1-based)
        accept: True to move the session, False to keep it

    Returns:
        dict with status, session and message
    """
    try:
        store_path = default_store_path()
        store = open_store(store_path)
        if accept:
            plan = accept_session_suggestion(store, exam_id, session - 1)
        else:
            plan = reject_session_suggestion(store, exam_id, session - 1)
        if plan is None:
            return {"status": "error", "message": f"Exam {exam_id} has no session {session}"}
        save_store(store, store_path)

        return {
            "status": "success",
            "session": _session_info(exam_id, session - 1, plan),
            "message": f"Session at {plan.when:%Y-%m-%d %H:%M}"
        }

    except Exception as e:
        return {
            "status": "error",
            "message": f"Failed to resolve suggestion: {str(e)}"
        }


def get_progress(days: int = 7) -> dict:
    """
    Summarize progress and the plan for the coming days.

    Args:
        days: How many days of plan to include (default 7)

    Returns:
        dict with status, progress, upcoming exam count, daily plan and message
    """
    try:
        store = open_store(default_store_path())
        progress = compute_progress(store)
        daily = []
        for day_plan in weekly_plan(store, days=days):
            daily.append({
                "day": day_plan.day.isoformat(),
                "sessions": [
                    {**_session_info(s.exam_id, s.index, s.session), "subject": s.subject, "urgent": s.urgent}
                    for s in day_plan.sessions
                ],
            })

        return {
            "status": "success",
            "progress": progress.model_dump(),
            "upcoming_exams": len(upcoming_exams(store)),
            "points": store.profile.points,
            "badges": store.profile.badges,
            "days": daily,
            "message": f"{progress.done}/{progress.total} sessions done ({progress.percent}%)"
        }

    except Exception as e:
        return {
            "status": "error",
            "message": f"Failed to compute progress: {str(e)}"
        }


# ============================================================================
# REMINDER TOOLS
# ============================================================================

def create_reminder(title: str, when: str, message: str = "") -> dict:
    """
    Set a reminder.

    Args:
        title: Short title
        when: Date and time (YYYY-MM-DDTHH:MM)
        message: Optional body text

    Returns:
        dict with status, reminder_id and message
    """
    try:
        store_path = default_store_path()
        store = open_store(store_path)
        reminder = add_reminder(store, title, when, message)
        save_store(store, store_path)
        return {
            "status": "success",
            "reminder_id": reminder.id,
            "message": f"Reminder set for {reminder.when:%Y-%m-%d %H:%M}"
        }

    except Exception as e:
        return {
            "status": "error",
            "message": f"Failed to set reminder: {str(e)}"
        }


def postpone_reminder(reminder_id: int, minutes: int = 10, accept_suggestion: bool = False) -> dict:
    """
    Snooze a reminder, optionally accepting the better-time suggestion
    when one is offered.

    Args:
        reminder_id: Reminder ID
        minutes: Delay in minutes (default 10)
        accept_suggestion: Move to the preferred hour if suggested

    Returns:
        dict with status, when, suggestion and message
    """
    try:
        store_path = default_store_path()
        store = open_store(store_path)
        outcome = snooze_reminder(store, reminder_id, minutes)
        if outcome is None:
            return {"status": "error", "message": f"Reminder {reminder_id} not found"}

        suggestion = outcome.suggestion.proposed_when.isoformat() if outcome.suggestion else None
        moved = suggestion is not None and accept_suggestion
        if moved:
            accept_reminder_suggestion(store, reminder_id)
        save_store(store, store_path)

        reminder = get_reminder(store, reminder_id)
        return {
            "status": "success",
            "suggestion": suggestion,
            "moved_to_suggestion": moved,
            "when": reminder.when.isoformat(),
            "message": f"Reminder at {reminder.when:%Y-%m-%d %H:%M}"
        }

    except Exception as e:
        return {
            "status": "error",
            "message": f"Failed to snooze reminder: {str(e)}"
        }


def check_due() -> dict:
    """
    Check which reminders and sessions are due right now.

    Returns:
        dict with status, due items and message
    """
    try:
        store_path = default_store_path()
        store = open_store(store_path)
        due = collect_due(store)
        if due:
            save_store(store, store_path)
        return {
            "status": "success",
            "due": [item.model_dump(mode="json") for item in due],
            "message": f"{len(due)} item(s) due"
        }

    except Exception as e:
        return {
            "status": "error",
            "due": [],
            "message": f"Due check failed: {str(e)}"
        }
