"""Flashcard deck models."""
from pydantic import BaseModel, Field


class Flashcard(BaseModel):
    """Single question/answer card."""
    id: int
    question: str
    answer: str


class FlashcardDeck(BaseModel):
    """Cards grouped by subject and topic."""
    id: int
    subject: str
    topic: str
    cards: list[Flashcard] = Field(default_factory=list)
