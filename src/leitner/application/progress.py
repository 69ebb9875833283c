"""
Progress statistics over the current buckets and the practice history.

This is a pure computation module with no I/O.
"""

from collections import Counter
from collections.abc import Iterable, Mapping, Set

from leitner.domain.models import (
    AnswerDifficulty,
    Flashcard,
    PracticeRecord,
    ProgressStats,
)

# Hard still counts as a correct recall; only Wrong is a miss.
CORRECT_DIFFICULTIES = frozenset({AnswerDifficulty.HARD, AnswerDifficulty.EASY})


def compute_progress(
    buckets: Mapping[int, Set[Flashcard]],
    history: Iterable[PracticeRecord],
) -> ProgressStats:
    """
    Compute summary statistics.

    The bucket counts come from the current snapshot and the rates from the
    full history; the two inputs are not cross-checked.
    """
    records = list(history)

    total_cards = 0
    cards_by_bucket: dict[int, int] = {}
    for bucket_num, cards in buckets.items():
        total_cards += len(cards)
        cards_by_bucket[bucket_num] = len(cards)

    max_bucket = max(cards_by_bucket, default=0)
    dense_counts = {i: cards_by_bucket.get(i, 0) for i in range(max_bucket + 1)}

    total_events = len(records)
    return ProgressStats(
        total_cards=total_cards,
        cards_by_bucket=dense_counts,
        success_rate=_success_rate(records),
        average_moves_per_card=_average_moves(records),
        total_practice_events=total_events,
    )


def _success_rate(records: list[PracticeRecord]) -> float:
    if not records:
        return 0.0
    correct = sum(1 for r in records if r.difficulty in CORRECT_DIFFICULTIES)
    return correct / len(records) * 100


def _average_moves(records: list[PracticeRecord]) -> float:
    """
    Practice events per distinct card seen in the history.
    """
    moves = Counter(r.card_key for r in records)
    if not moves:
        return 0.0
    return sum(moves.values()) / len(moves)
