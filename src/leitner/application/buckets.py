"""
Conversions between the bucket representations.

* BucketMap: bucket number -> set of cards (sparse, the canonical form).
* BucketSets: dense list indexed by bucket number, used by the scheduler.
* Schedule: card -> scheduled day, the flat form kept by the store.

This is a pure computation module with no I/O.
"""

from collections.abc import Iterable, Mapping

from leitner.domain.models import BucketMap, BucketSets, Flashcard


def to_bucket_sets(buckets: BucketMap) -> BucketSets:
    """
    Convert a BucketMap to a dense list of sets.

    The list has one entry per bucket from 0 to the highest bucket number;
    buckets missing from the input become empty sets. An empty map gives a
    single empty bucket 0. Sets are copied, not shared with the input.
    """
    max_bucket = max(buckets.keys(), default=0)
    result: BucketSets = [set() for _ in range(max_bucket + 1)]
    for bucket_num, cards in buckets.items():
        result[bucket_num].update(cards)
    return result


def from_bucket_sets(bucket_sets: Iterable[Iterable[Flashcard]]) -> BucketMap:
    """
    Regroup a dense list of sets into a BucketMap, dropping empty buckets.
    """
    return {
        bucket_num: set(cards)
        for bucket_num, cards in enumerate(bucket_sets)
        if cards
    }


def find_bucket(buckets: BucketMap, card: Flashcard) -> int | None:
    """
    Return the first bucket that holds the card, or None if it is new.
    """
    for bucket_num, cards in buckets.items():
        if card in cards:
            return bucket_num
    return None


def buckets_from_schedule(
    schedule: Iterable[tuple[Flashcard, int]],
    max_day: int | None = None,
) -> BucketMap:
    """
    Build a dense BucketMap from (card, scheduled_day) pairs.

    Every bucket from 0 to max_day (or the highest day seen) is present,
    empty where no card is scheduled.
    """
    pairs = list(schedule)
    if max_day is None:
        max_day = max((day for _, day in pairs), default=0)

    buckets: BucketMap = {day: set() for day in range(max_day + 1)}
    for card, day in pairs:
        buckets.setdefault(day, set()).add(card)
    return buckets


def schedule_from_buckets(buckets: Mapping[int, Iterable[Flashcard]]) -> dict[Flashcard, int]:
    """
    Flatten a BucketMap into card -> scheduled day.

    If a card somehow appears in several buckets the first one wins,
    matching find_bucket. This is the inverse of buckets_from_schedule;
    the store writes one row per answer instead of a full schedule.
    """
    schedule: dict[Flashcard, int] = {}
    for bucket_num, cards in buckets.items():
        for card in cards:
            schedule.setdefault(card, bucket_num)
    return schedule
