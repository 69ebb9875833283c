"""
Ports (interfaces) for card storage.

These define the contract that infrastructure adapters must implement.
Application services depend on these abstractions, not concrete implementations.
"""

from abc import ABC, abstractmethod

from .models import AnswerDifficulty, BucketMap, Flashcard, PracticeRecord


class FlashcardRepository(ABC):
    """
    Port for loading and persisting cards and practice history.

    The store keeps one scheduled-day value per card; implementations are
    responsible for turning that into a BucketMap and back.

    Implementations:
        - SqlFlashcardRepository: SQLAlchemy over any relational engine.
    """

    @abstractmethod
    def load_bucket_model(self) -> BucketMap:
        """
        Rebuild the bucket model from stored scheduled days.

        Returns:
            A dense BucketMap with keys 0..max scheduled day. Every stored
            card appears in exactly one bucket.
        """
        pass

    @abstractmethod
    def load_history(self) -> list[PracticeRecord]:
        """
        Returns:
            Every stored practice record, oldest first.
        """
        pass

    @abstractmethod
    def find_card(self, front: str, back: str) -> Flashcard | None:
        """Look a card up by its (front, back) identity."""
        pass

    @abstractmethod
    def record_answer(
        self,
        card: Flashcard,
        previous_bucket: int,
        new_bucket: int,
        difficulty: AnswerDifficulty,
        timestamp: int,
    ) -> PracticeRecord:
        """
        Move a card to its new bucket and append one practice record.

        Both writes happen in one transaction: either both are stored or
        neither is.

        Raises:
            CardNotFoundError: The card is not in the store.
            StaleBucketError: The card is no longer in previous_bucket.
            DuplicateEventError: A record for this card and timestamp exists.
        """
        pass

    @abstractmethod
    def append_flashcard(self, card: Flashcard) -> int:
        """
        Insert a new card in bucket 0.

        Returns:
            The storage row id of the new card.

        Raises:
            DuplicateCardError: A card with the same front/back exists.
        """
        pass
