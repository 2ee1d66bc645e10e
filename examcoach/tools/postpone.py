"""Adaptive postponement: snooze sessions and propose a better time."""
import logging
from datetime import datetime, timedelta

from pydantic import BaseModel

from examcoach.models.exam import Postponable


logger = logging.getLogger(__name__)

POSTPONE_THRESHOLD = 3
DEFAULT_SNOOZE_MINUTES = 30


class TimeSuggestion(BaseModel):
    """Advisory proposal to move a repeatedly snoozed item."""
    current_when: datetime
    proposed_when: datetime
    postpone_count: int


def snooze(item: Postponable, delay_minutes: int = DEFAULT_SNOOZE_MINUTES) -> bool:
    """
    Push an item back and count the postponement.

    No cap is applied to the count or to the total delay.

    Returns:
        True when the postpone count has reached the threshold and a
        better time should be suggested
    """
    item.when = item.when + timedelta(minutes=delay_minutes)
    item.postpone_count += 1
    logger.debug(f"Snoozed to {item.when.isoformat()} (postponed {item.postpone_count}x)")
    return needs_suggestion(item)


def needs_suggestion(item: Postponable) -> bool:
    """Threshold check, re-evaluated every time it is asked."""
    return item.postpone_count >= POSTPONE_THRESHOLD


def suggest_better_time(item: Postponable, preferred_hour: int) -> TimeSuggestion:
    """Propose preferred_hour:00 on the day the item currently falls on."""
    hour = min(max(preferred_hour, 0), 23)
    proposed = item.when.replace(hour=hour, minute=0, second=0, microsecond=0)
    return TimeSuggestion(
        current_when=item.when,
        proposed_when=proposed,
        postpone_count=item.postpone_count
    )


def accept_suggestion(item: Postponable, suggestion: TimeSuggestion) -> None:
    """Apply a suggestion: move the item and reset its postpone count."""
    item.when = suggestion.proposed_when
    item.postpone_count = 0
    logger.info(f"Accepted suggestion, moved to {item.when.isoformat()}")


def reject_suggestion(item: Postponable, suggestion: TimeSuggestion) -> None:
    """Decline a suggestion. The item is left as it is."""
    logger.debug(f"Rejected suggestion for {suggestion.proposed_when.isoformat()}")
