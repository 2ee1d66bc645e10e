"""Free-standing timed reminder model."""
from pydantic import field_validator

from examcoach.models.exam import Postponable


class Reminder(Postponable):
    """User reminder; snoozed through the same tracker as sessions."""
    id: int
    title: str
    message: str = ""
    voice: str = ""  # text for a speech notifier, if one is attached

    @field_validator('title')
    @classmethod
    def validate_title(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError('title must not be empty')
        return v
