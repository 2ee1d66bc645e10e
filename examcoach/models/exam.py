"""Exam and review session models."""
from datetime import date, datetime
from typing import Literal

from pydantic import BaseModel, Field, field_validator


Intensity = Literal["low", "medium", "high"]


class Postponable(BaseModel):
    """Anything the postponement tracker can shift in time."""
    when: datetime
    postpone_count: int = 0
    notified: bool = False  # set by the due checker

    @field_validator('when')
    @classmethod
    def to_naive_local(cls, v: datetime) -> datetime:
        """Store times as naive local time; offset-qualified input is converted."""
        if v.tzinfo is not None:
            return v.astimezone().replace(tzinfo=None)
        return v

    @field_validator('postpone_count')
    @classmethod
    def validate_postpone_count(cls, v: int) -> int:
        """Ensure postpone_count is non-negative."""
        if v < 0:
            raise ValueError('postpone_count must be non-negative')
        return v


class SessionPlan(Postponable):
    """One scheduled review slot of an exam plan."""
    focus: str
    done: bool = False


class ExamRecord(BaseModel):
    """A user-declared exam with its generated review sessions."""
    id: int  # millisecond timestamp at creation
    subject: str
    exam_date: date
    content: str = ""
    intensity: str = "medium"  # unknown values fall back to the default count
    plan: list[SessionPlan] = Field(default_factory=list)

    @field_validator('subject')
    @classmethod
    def validate_subject(cls, v: str) -> str:
        """Strip whitespace and reject empty subjects."""
        v = v.strip()
        if not v:
            raise ValueError('subject must not be empty')
        return v

    def session(self, index: int) -> SessionPlan | None:
        """Return the session at a 0-based position, or None."""
        if 0 <= index < len(self.plan):
            return self.plan[index]
        return None
