import pytest

from leitner.application.progress import compute_progress
from leitner.domain.models import AnswerDifficulty, PracticeRecord


def record(front, difficulty, timestamp=1000):
    return PracticeRecord(front, front.lower(), timestamp, difficulty, 0, 0)


def test_empty_inputs():
    stats = compute_progress({}, [])
    assert stats.total_cards == 0
    assert stats.cards_by_bucket == {0: 0}
    assert stats.success_rate == 0
    assert stats.average_moves_per_card == 0
    assert stats.total_practice_events == 0


def test_empty_history_never_divides_by_zero(card_a, card_b):
    stats = compute_progress({0: {card_a}, 1: {card_b}}, [])
    assert stats.success_rate == 0.0
    assert stats.average_moves_per_card == 0.0
    assert stats.total_cards == 2


def test_cards_by_bucket_is_dense(card_a, card_b, card_c):
    stats = compute_progress({0: {card_a}, 3: {card_b, card_c}}, [])
    assert stats.cards_by_bucket == {0: 1, 1: 0, 2: 0, 3: 2}
    assert stats.total_cards == 3


def test_three_events_two_cards():
    history = [
        record("P", AnswerDifficulty.EASY, 1),
        record("P", AnswerDifficulty.WRONG, 2),
        record("Q", AnswerDifficulty.HARD, 3),
    ]
    stats = compute_progress({}, history)

    assert stats.success_rate == pytest.approx(66.67, abs=0.01)
    assert stats.average_moves_per_card == 1.5
    assert stats.total_practice_events == 3


def test_hard_counts_as_correct():
    stats = compute_progress({}, [record("P", AnswerDifficulty.HARD)])
    assert stats.success_rate == 100.0


def test_all_wrong():
    history = [record("P", AnswerDifficulty.WRONG, t) for t in range(4)]
    stats = compute_progress({}, history)
    assert stats.success_rate == 0.0
    assert stats.average_moves_per_card == 4.0


def test_accepts_iterator():
    history = iter([record("P", AnswerDifficulty.EASY), record("Q", AnswerDifficulty.EASY)])
    stats = compute_progress({}, history)
    assert stats.total_practice_events == 2
    assert stats.average_moves_per_card == 1.0
