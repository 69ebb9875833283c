"""
Practice Service — Application layer orchestrator.

Composes the pure scheduling functions with repository reads and writes.
These are the operations a route layer or the CLI calls.
"""

import logging
import time
from collections.abc import Callable, Iterable

from leitner.domain.errors import CardNotFoundError, DuplicateCardError, InvalidInputError
from leitner.domain.models import (
    AnswerDifficulty,
    Day,
    Flashcard,
    PracticeRecord,
    ProgressStats,
    Timestamp,
)
from leitner.domain.ports import FlashcardRepository

from .buckets import find_bucket, to_bucket_sets
from .progress import compute_progress
from .scheduler import get_hint, select_due
from .transitions import apply_answer
from .utils.text import clean_field, split_tags

logger = logging.getLogger(__name__)


def epoch_millis() -> int:
    return int(time.time() * 1000)


class PracticeService:
    """
    Application service for practising cards.

    Follows Dependency Inversion: depends on the FlashcardRepository
    abstraction, not a concrete adapter. Holds no state of its own.
    """

    def __init__(
        self,
        repository: FlashcardRepository,
        clock: Callable[[], int] | None = None,
    ):
        """
        Args:
            repository: The repository (port) for cards and history.
            clock: Returns the current epoch time in milliseconds.
        """
        self._repo = repository
        self._clock = clock or epoch_millis

    def get_due_cards(self, day: int) -> list[Flashcard]:
        """
        Cards to practise on the given day, sorted by front then back.

        Raises:
            InvalidInputError: day is negative or not an integer.
        """
        day = Day(day)
        buckets = self._repo.load_bucket_model()
        due = select_due(to_bucket_sets(buckets), day)

        logger.info(f"Day {day}: practice {len(due)} cards")
        return sorted(due, key=lambda card: card.key)

    def submit_answer(
        self,
        front: str,
        back: str,
        difficulty: AnswerDifficulty | int | str,
        timestamp: int | None = None,
    ) -> PracticeRecord:
        """
        Record an answer and move the card to its new bucket.

        Returns:
            The stored practice record.

        Raises:
            InvalidInputError: Unknown difficulty or negative timestamp.
            CardNotFoundError: No such card in the store.
            ConflictError: Duplicate event, or the card moved concurrently.
        """
        difficulty = AnswerDifficulty.parse(difficulty)
        when = Timestamp(self._clock() if timestamp is None else timestamp)

        card = self._repo.find_card(front, back)
        if card is None:
            raise CardNotFoundError(front, back)

        buckets = self._repo.load_bucket_model()
        previous = find_bucket(buckets, card)
        if previous is None:
            # The store has it but the snapshot does not; treat as missing.
            raise CardNotFoundError(front, back)

        updated = apply_answer(buckets, card, difficulty)
        new = find_bucket(updated, card)

        record = self._repo.record_answer(card, previous, new, difficulty, when)
        logger.info(
            f'Updated card "{card.front}" with difficulty "{difficulty.name}". '
            f"Moved from bucket {previous} to {new}."
        )
        return record

    def get_progress(self) -> ProgressStats:
        """Statistics over the current buckets and the full history."""
        return compute_progress(self._repo.load_bucket_model(), self._repo.load_history())

    def add_flashcard(
        self,
        front: str | None,
        back: str | None,
        hint: str | None = None,
        tags: str | Iterable[str] | None = None,
    ) -> int:
        """
        Add a new card in bucket 0.

        Front, back and hint are trimmed; a blank hint is dropped. Tags may
        be a list or a comma-joined string.

        Returns:
            The storage id of the new card.

        Raises:
            InvalidInputError: front or back is missing or blank.
            DuplicateCardError: The card already exists.
        """
        clean_front = clean_field(front)
        clean_back = clean_field(back)
        if clean_front is None:
            raise InvalidInputError("Front side of the card is required")
        if clean_back is None:
            raise InvalidInputError("Back side of the card is required")

        card = Flashcard(
            front=clean_front,
            back=clean_back,
            hint=clean_field(hint),
            tags=split_tags(tags),
        )
        card_id = self._repo.append_flashcard(card)
        logger.info(f"Added card {card_id}: {card.front!r}")
        return card_id

    def get_hint(self, front: str, back: str) -> str:
        """
        Raises:
            CardNotFoundError: No such card in the store.
        """
        card = self._repo.find_card(front, back)
        if card is None:
            raise CardNotFoundError(front, back)
        logger.info(f'Hint requested for card "{card.front}".')
        return get_hint(card)

    def seed(self, cards: Iterable[Flashcard]) -> int:
        """
        Add cards that are not stored yet.

        Returns:
            The number of cards inserted.
        """
        inserted = 0
        for card in cards:
            if self._repo.find_card(card.front, card.back) is not None:
                continue
            try:
                self._repo.append_flashcard(card)
            except DuplicateCardError:
                # Added concurrently between the lookup and the insert.
                logger.debug(f"Skipping existing card {card.front!r}")
                continue
            inserted += 1

        logger.info(f"Seeded {inserted} cards")
        return inserted
