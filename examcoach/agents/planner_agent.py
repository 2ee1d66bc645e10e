"""Planner agent: schedules exam reviews and handles postponements."""
from google.adk.agents.llm_agent import Agent

from examcoach.agents.tools import (
    complete_session,
    create_exam,
    get_current_date,
    get_progress,
    list_exams,
    postpone_session,
    remove_exam,
    resolve_suggestion,
)

planner_agent = Agent(
    model="gemini-2.5-flash",
    name="planner_agent",
    description="Creates exam review schedules and adapts them when sessions are postponed.",
    instruction=(
        "Use get_current_date before interpreting relative dates. Create exams with create_exam, "
        "track sessions with complete_session and postpone_session. When postpone_session returns a "
        "suggestion, ask the user whether to move the session and call resolve_suggestion with the answer."
    ),
    tools=[
        get_current_date,
        create_exam,
        list_exams,
        remove_exam,
        complete_session,
        postpone_session,
        resolve_suggestion,
        get_progress,
    ],
)
