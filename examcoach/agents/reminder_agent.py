"""Reminder agent: sets, snoozes and checks reminders."""
from google.adk.agents.llm_agent import Agent

from examcoach.agents.tools import check_due, create_reminder, get_current_date, postpone_reminder

reminder_agent = Agent(
    model="gemini-2.5-flash",
    name="reminder_agent",
    description="Sets study reminders and reports what is due.",
    instruction="Use create_reminder, postpone_reminder and check_due to manage reminders.",
    tools=[get_current_date, create_reminder, postpone_reminder, check_due],
)
