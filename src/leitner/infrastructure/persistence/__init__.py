# Infrastructure Persistence Package
from .repository import SqlFlashcardRepository, parse_flashcard, parse_practice_record
from .tables import Base, FlashcardRow, PracticeRecordRow

__all__ = [
    "Base",
    "FlashcardRow",
    "PracticeRecordRow",
    "SqlFlashcardRepository",
    "parse_flashcard",
    "parse_practice_record",
]
