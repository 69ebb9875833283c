import pytest

from leitner.application.buckets import to_bucket_sets
from leitner.application.scheduler import get_hint, is_bucket_due, select_due
from leitner.domain.constants import NO_HINT_MESSAGE
from leitner.domain.models import Flashcard


@pytest.fixture
def bucket_sets(card_a, card_b, card_c):
    # A in bucket 0, B in bucket 1, C in bucket 2
    return to_bucket_sets({0: {card_a}, 1: {card_b}, 2: {card_c}})


def test_day_four_everything_due(bucket_sets, card_a, card_b, card_c):
    assert select_due(bucket_sets, 4) == {card_a, card_b, card_c}


def test_day_two_skips_bucket_two(bucket_sets, card_a, card_b):
    assert select_due(bucket_sets, 2) == {card_a, card_b}


def test_odd_day_only_bucket_zero(bucket_sets, card_a):
    assert select_due(bucket_sets, 3) == {card_a}


def test_day_zero_makes_every_bucket_due(card_a, card_b):
    bucket_sets = to_bucket_sets({0: {card_a}, 7: {card_b}})
    assert select_due(bucket_sets, 0) == {card_a, card_b}


@pytest.mark.parametrize("day", range(0, 40))
def test_bucket_zero_always_due(bucket_sets, card_a, day):
    assert card_a in select_due(bucket_sets, day)


@pytest.mark.parametrize("day", range(0, 33))
@pytest.mark.parametrize("bucket", [1, 2, 3, 4])
def test_bucket_due_iff_day_divisible(day, bucket):
    card = Flashcard("q", "a")
    bucket_sets = to_bucket_sets({bucket: {card}})
    assert (card in select_due(bucket_sets, day)) == (day % 2**bucket == 0)


def test_bucket_two_schedule():
    card = Flashcard("q", "a")
    bucket_sets = to_bucket_sets({2: {card}})
    due_days = [d for d in range(13) if card in select_due(bucket_sets, d)]
    assert due_days == [0, 4, 8, 12]


def test_duplicate_card_across_buckets_is_deduplicated(card_a):
    bucket_sets = [{card_a}, {Flashcard(card_a.front, card_a.back)}]
    due = select_due(bucket_sets, 2)
    assert due == {card_a}
    assert len(due) == 1


def test_empty_buckets():
    assert select_due([set()], 5) == set()
    assert select_due([], 5) == set()


def test_is_bucket_due():
    assert is_bucket_due(0, 1)
    assert is_bucket_due(3, 16)
    assert not is_bucket_due(3, 12)


def test_get_hint(card_a, card_b):
    assert get_hint(card_a) == "Oblique kicks."
    assert get_hint(card_b) == NO_HINT_MESSAGE
    assert get_hint(Flashcard("f", "b", hint="")) == NO_HINT_MESSAGE
