"""Whole persisted state of the app."""
from typing import Optional

from pydantic import BaseModel, Field

from examcoach.models.exam import ExamRecord
from examcoach.models.flashcards import FlashcardDeck
from examcoach.models.profile import UserProfile
from examcoach.models.reminder import Reminder


class StudyStore(BaseModel):
    """
    Explicit container for every collection the app mutates.

    Operations receive the store and change it in memory only; whoever
    called them decides when to save it.
    """
    version: int = 1
    exams: list[ExamRecord] = Field(default_factory=list)
    reminders: list[Reminder] = Field(default_factory=list)
    decks: list[FlashcardDeck] = Field(default_factory=list)
    profile: UserProfile = Field(default_factory=UserProfile)
    saved_at: Optional[str] = None  # ISO timestamp of the last save
