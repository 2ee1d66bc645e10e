"""Root agent: ADK entrypoint; routes to the planner and reminder agents."""
from google.adk.agents.llm_agent import Agent

from examcoach.agents.planner_agent import planner_agent
from examcoach.agents.reminder_agent import reminder_agent

root_agent = Agent(
    model="gemini-2.5-flash",
    name="root_agent",
    description="A helpful assistant for exam study planning.",
    instruction="Answer user questions and route to the planner or reminder agent as needed.",
    sub_agents=[planner_agent, reminder_agent],
)
