"""
Domain models for Leitner scheduling.

These are pure data structures with no I/O or external dependencies.
"""

from dataclasses import dataclass, field
from enum import IntEnum

from .errors import InvalidInputError


class _NonNegativeInt(int):
    """
    An int that can only be constructed from a non-negative integral value.

    Booleans and floats with a fractional part are rejected so that a bad
    day or timestamp never reaches the scheduler.
    """

    label = "value"

    def __new__(cls, value):
        if isinstance(value, bool):
            raise InvalidInputError(f"{cls.label} must be an integer, got {value!r}")
        if isinstance(value, str):
            try:
                value = int(value.strip())
            except ValueError:
                raise InvalidInputError(
                    f"{cls.label} must be an integer, got {value!r}"
                ) from None
        elif isinstance(value, float):
            if not value.is_integer():
                raise InvalidInputError(f"{cls.label} must be an integer, got {value!r}")
            value = int(value)
        elif not isinstance(value, int):
            raise InvalidInputError(f"{cls.label} must be an integer, got {value!r}")
        if value < 0:
            raise InvalidInputError(f"{cls.label} must be >= 0, got {value}")
        return super().__new__(cls, value)


class Day(_NonNegativeInt):
    """Simulated day number used to select due cards."""

    label = "day"


class BucketNumber(_NonNegativeInt):
    """Index of a Leitner bucket."""

    label = "bucket"


class Timestamp(_NonNegativeInt):
    """Epoch timestamp of a practice event, in milliseconds."""

    label = "timestamp"


class AnswerDifficulty(IntEnum):
    """
    Learner's self-reported recall outcome.

    The ordinals are stored in the database and must not change.
    """

    WRONG = 0
    HARD = 1
    EASY = 2

    @classmethod
    def parse(cls, value: "AnswerDifficulty | int | str") -> "AnswerDifficulty":
        """Accept an ordinal (int or digit string) or a case-insensitive name."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            text = value.strip()
            if text.isdigit():
                value = int(text)
            else:
                try:
                    return cls[text.upper()]
                except KeyError:
                    raise InvalidInputError(f"Unknown difficulty: {value!r}") from None
        if isinstance(value, bool) or not isinstance(value, int):
            raise InvalidInputError(f"Unknown difficulty: {value!r}")
        try:
            return cls(value)
        except ValueError:
            raise InvalidInputError(f"Unknown difficulty: {value!r}") from None


@dataclass(frozen=True)
class Flashcard:
    """
    A single review unit.

    Identity is the (front, back) pair: hint and tags take no part in
    equality or hashing, so two cards with the same text are one card.

    Attributes:
        front: Prompt side. Required, non-empty.
        back: Answer side. Required, non-empty.
        hint: Optional hint shown on request.
        tags: Ordered tags, fixed at creation.
    """

    front: str
    back: str
    hint: str | None = field(default=None, compare=False)
    tags: tuple[str, ...] = field(default=(), compare=False)

    def __post_init__(self):
        if not isinstance(self.front, str) or not self.front:
            raise InvalidInputError("Flashcard must have a front")
        if not isinstance(self.back, str) or not self.back:
            raise InvalidInputError("Flashcard must have a back")
        # Lists are accepted for convenience but stored immutably.
        if not isinstance(self.tags, tuple):
            object.__setattr__(self, "tags", tuple(self.tags))

    @property
    def key(self) -> tuple[str, str]:
        return (self.front, self.back)

    def get_tags(self) -> list[str]:
        return list(self.tags)


# Bucket number -> cards currently in that bucket.
BucketMap = dict[int, set[Flashcard]]

# Index = bucket number; index 0 is always present.
BucketSets = list[set[Flashcard]]


@dataclass(frozen=True)
class PracticeRecord:
    """
    A single practice event. Immutable and append-only.

    Attributes:
        card_front: Front of the practised card.
        card_back: Back of the practised card.
        timestamp: Epoch milliseconds of the answer.
        difficulty: Reported difficulty.
        previous_bucket: Bucket before the answer.
        new_bucket: Bucket after the answer.
    """

    card_front: str
    card_back: str
    timestamp: int
    difficulty: AnswerDifficulty
    previous_bucket: int
    new_bucket: int

    def __post_init__(self):
        object.__setattr__(self, "timestamp", int(Timestamp(self.timestamp)))
        object.__setattr__(self, "difficulty", AnswerDifficulty.parse(self.difficulty))
        object.__setattr__(self, "previous_bucket", int(BucketNumber(self.previous_bucket)))
        object.__setattr__(self, "new_bucket", int(BucketNumber(self.new_bucket)))

    @property
    def card_key(self) -> tuple[str, str]:
        return (self.card_front, self.card_back)


@dataclass
class ProgressStats:
    """
    Summary statistics derived from the bucket model and the event log.

    Never persisted; recomputed on demand.
    """

    total_cards: int
    cards_by_bucket: dict[int, int]
    success_rate: float  # percentage, 0-100
    average_moves_per_card: float
    total_practice_events: int

    def to_dict(self) -> dict:
        return {
            "totalCards": self.total_cards,
            "cardsByBucket": dict(self.cards_by_bucket),
            "successRate": self.success_rate,
            "averageMovesPerCard": self.average_moves_per_card,
            "totalPracticeEvents": self.total_practice_events,
        }
