"""User profile: points, badges and scheduling preferences."""
from pydantic import BaseModel, Field, field_validator


class UserProfile(BaseModel):
    """Gamification state and the preferred study hour."""
    points: int = 0
    badges: list[str] = Field(default_factory=list)
    preferred_hour: int = 19

    @field_validator('points')
    @classmethod
    def validate_points(cls, v: int) -> int:
        """Ensure points are non-negative."""
        if v < 0:
            raise ValueError('points must be non-negative')
        return v

    @field_validator('preferred_hour')
    @classmethod
    def validate_preferred_hour(cls, v: int) -> int:
        """Ensure preferred_hour is an hour of the day."""
        if not 0 <= v <= 23:
            raise ValueError('preferred_hour must be between 0 and 23')
        return v
