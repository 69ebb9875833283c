"""
Due-set selection for the Leitner schedule.

Bucket 0 is due every day. Bucket n (n >= 1) is due on days divisible by
2**n, so each promotion doubles the review interval. Day 0 is divisible by
everything, which makes every bucket due on the first day.
"""

from collections.abc import Sequence, Set

from leitner.domain.constants import NO_HINT_MESSAGE
from leitner.domain.models import Flashcard


def is_bucket_due(bucket_num: int, day: int) -> bool:
    if bucket_num == 0:
        return True
    return day % (1 << bucket_num) == 0


def select_due(bucket_sets: Sequence[Set[Flashcard]], day: int) -> set[Flashcard]:
    """
    Return the cards to practise on the given day.

    Args:
        bucket_sets: Dense list of buckets, index = bucket number.
        day: Non-negative day number; validated by the caller.

    Returns:
        The union of all due buckets, deduplicated by card identity.
    """
    due: set[Flashcard] = set()
    for bucket_num, cards in enumerate(bucket_sets):
        if cards and is_bucket_due(bucket_num, day):
            due.update(cards)
    return due


def get_hint(card: Flashcard) -> str:
    """Return the card's hint, or a placeholder when it has none."""
    if card.hint:
        return card.hint
    return NO_HINT_MESSAGE
