"""
Bucket transitions after an answer.

Wrong sends a card back to bucket 0, Hard keeps it where it is and Easy
promotes it one bucket. A card found in no bucket is treated as new.
"""

import logging

from leitner.domain.constants import NEW_CARD_BUCKET
from leitner.domain.models import AnswerDifficulty, BucketMap, Flashcard

from .buckets import find_bucket

logger = logging.getLogger(__name__)


def next_bucket(current: int | None, difficulty: AnswerDifficulty) -> int:
    """
    Compute the target bucket for a card.

    Args:
        current: The card's bucket, or None for a new card.
        difficulty: The reported answer.
    """
    if difficulty == AnswerDifficulty.WRONG:
        return NEW_CARD_BUCKET

    effective = NEW_CARD_BUCKET if current is None else current
    if difficulty == AnswerDifficulty.HARD:
        return effective
    return effective + 1


def apply_answer(
    buckets: BucketMap, card: Flashcard, difficulty: AnswerDifficulty
) -> BucketMap:
    """
    Return a new BucketMap with the card moved according to the answer.

    The input map and its sets are never modified; every set in the result
    is a fresh copy.
    """
    current = find_bucket(buckets, card)

    updated: BucketMap = {bucket_num: set(cards) for bucket_num, cards in buckets.items()}

    if current is not None:
        updated[current].discard(card)
    else:
        updated.setdefault(NEW_CARD_BUCKET, set())

    target = next_bucket(current, difficulty)
    updated.setdefault(target, set()).add(card)

    logger.debug(
        f"{card.front!r}: {difficulty.name} moves bucket {current} -> {target}"
    )
    return updated
