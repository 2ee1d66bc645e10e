"""User-entered flashcard decks."""
import logging
import random
from typing import Optional

from pydantic import BaseModel

from examcoach.models.flashcards import Flashcard, FlashcardDeck
from examcoach.models.store import StudyStore
from examcoach.tools.ids import generate_id


logger = logging.getLogger(__name__)


class DeckStats(BaseModel):
    decks: int
    cards: int


def find_deck(store: StudyStore, subject: str, topic: str) -> Optional[FlashcardDeck]:
    for deck in store.decks:
        if deck.subject == subject and deck.topic == topic:
            return deck
    return None


def add_flashcard(
    store: StudyStore,
    subject: str,
    topic: str,
    question: str,
    answer: str
) -> FlashcardDeck:
    """
    Add a card to the subject/topic deck, creating the deck if needed.

    Raises:
        ValueError: if any field is empty
    """
    subject, topic = subject.strip(), topic.strip()
    question, answer = question.strip(), answer.strip()
    if not (subject and topic and question and answer):
        raise ValueError("subject, topic, question and answer are all required")

    deck = find_deck(store, subject, topic)
    if deck is None:
        deck = FlashcardDeck(id=generate_id(d.id for d in store.decks), subject=subject, topic=topic)
        store.decks.append(deck)
        logger.info(f"Created deck {subject} / {topic}")

    deck.cards.append(Flashcard(
        id=generate_id(c.id for c in deck.cards),
        question=question,
        answer=answer
    ))
    return deck


def deck_stats(store: StudyStore) -> DeckStats:
    return DeckStats(
        decks=len(store.decks),
        cards=sum(len(d.cards) for d in store.decks)
    )


def study_order(deck: FlashcardDeck, seed: Optional[int] = None) -> list[Flashcard]:
    """Shuffled copy of the deck's cards for a practice session."""
    cards = list(deck.cards)
    random.Random(seed).shuffle(cards)
    return cards
