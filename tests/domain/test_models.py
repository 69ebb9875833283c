import pytest

from leitner.domain.errors import InvalidInputError
from leitner.domain.models import (
    AnswerDifficulty,
    BucketNumber,
    Day,
    Flashcard,
    PracticeRecord,
    ProgressStats,
    Timestamp,
)


class TestFlashcard:
    def test_identity_is_front_and_back(self):
        a = Flashcard("front", "back", "hint one", ("x",))
        b = Flashcard("front", "back", None, ("y", "z"))
        assert a == b
        assert hash(a) == hash(b)
        assert len({a, b}) == 1

    def test_different_back_is_different_card(self):
        assert Flashcard("front", "back") != Flashcard("front", "other")

    def test_requires_front(self):
        with pytest.raises(InvalidInputError):
            Flashcard("", "back")

    def test_requires_back(self):
        with pytest.raises(InvalidInputError):
            Flashcard("front", "")

    def test_tags_are_stored_immutably(self):
        tags = ["a", "b"]
        card = Flashcard("f", "b", tags=tags)
        tags.append("c")
        assert card.tags == ("a", "b")

        copy = card.get_tags()
        copy.append("z")
        assert card.get_tags() == ["a", "b"]

    def test_key(self):
        assert Flashcard("f", "b").key == ("f", "b")


class TestNonNegativeInts:
    @pytest.mark.parametrize("cls", [Day, BucketNumber, Timestamp])
    def test_accepts_zero_and_positive(self, cls):
        assert cls(0) == 0
        assert cls(12) == 12
        assert cls(3.0) == 3
        assert cls("7") == 7

    @pytest.mark.parametrize("cls", [Day, BucketNumber, Timestamp])
    @pytest.mark.parametrize("bad", [-1, 1.5, True, "abc", None])
    def test_rejects_invalid(self, cls, bad):
        with pytest.raises(InvalidInputError):
            cls(bad)

    def test_invalid_input_is_value_error(self):
        with pytest.raises(ValueError):
            Day(-3)


class TestAnswerDifficulty:
    def test_ordinals_are_stable(self):
        assert AnswerDifficulty.WRONG == 0
        assert AnswerDifficulty.HARD == 1
        assert AnswerDifficulty.EASY == 2

    @pytest.mark.parametrize(
        "raw, expected",
        [
            (0, AnswerDifficulty.WRONG),
            (2, AnswerDifficulty.EASY),
            ("1", AnswerDifficulty.HARD),
            ("easy", AnswerDifficulty.EASY),
            ("Wrong", AnswerDifficulty.WRONG),
            (AnswerDifficulty.HARD, AnswerDifficulty.HARD),
        ],
    )
    def test_parse(self, raw, expected):
        assert AnswerDifficulty.parse(raw) is expected

    @pytest.mark.parametrize("raw", [3, -1, "medium", "", None, True, 1.0])
    def test_parse_rejects_unknown(self, raw):
        with pytest.raises(InvalidInputError):
            AnswerDifficulty.parse(raw)


class TestPracticeRecord:
    def test_coerces_difficulty(self):
        record = PracticeRecord("f", "b", 1000, 2, 0, 1)
        assert record.difficulty is AnswerDifficulty.EASY
        assert record.card_key == ("f", "b")

    def test_rejects_negative_timestamp(self):
        with pytest.raises(InvalidInputError):
            PracticeRecord("f", "b", -5, AnswerDifficulty.EASY, 0, 1)

    def test_rejects_negative_bucket(self):
        with pytest.raises(InvalidInputError):
            PracticeRecord("f", "b", 5, AnswerDifficulty.EASY, -1, 0)

    def test_is_immutable(self):
        record = PracticeRecord("f", "b", 1000, AnswerDifficulty.HARD, 0, 0)
        with pytest.raises(AttributeError):
            record.new_bucket = 3


def test_progress_stats_to_dict():
    stats = ProgressStats(
        total_cards=3,
        cards_by_bucket={0: 2, 1: 1},
        success_rate=50.0,
        average_moves_per_card=2.0,
        total_practice_events=4,
    )
    assert stats.to_dict() == {
        "totalCards": 3,
        "cardsByBucket": {0: 2, 1: 1},
        "successRate": 50.0,
        "averageMovesPerCard": 2.0,
        "totalPracticeEvents": 4,
    }
