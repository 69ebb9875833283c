# Domain Package
from .errors import (
    CardNotFoundError,
    ConflictError,
    DuplicateCardError,
    DuplicateEventError,
    InvalidInputError,
    LeitnerError,
    MalformedRowError,
    StaleBucketError,
    StoreUnavailableError,
)
from .models import (
    AnswerDifficulty,
    BucketMap,
    BucketNumber,
    BucketSets,
    Day,
    Flashcard,
    PracticeRecord,
    ProgressStats,
    Timestamp,
)
from .ports import FlashcardRepository

__all__ = [
    "AnswerDifficulty",
    "BucketMap",
    "BucketNumber",
    "BucketSets",
    "CardNotFoundError",
    "ConflictError",
    "Day",
    "DuplicateCardError",
    "DuplicateEventError",
    "Flashcard",
    "FlashcardRepository",
    "InvalidInputError",
    "LeitnerError",
    "MalformedRowError",
    "PracticeRecord",
    "ProgressStats",
    "StaleBucketError",
    "StoreUnavailableError",
    "Timestamp",
]
