"""
SQLAlchemy ORM tables for card storage.

A card row carries a single scheduled_day value, which is its bucket
number. Practice records are append-only and reference cards by row id.
"""

from sqlalchemy import BigInteger, Column, ForeignKey, Integer, Text, UniqueConstraint
from sqlalchemy.orm import declarative_base, relationship

Base = declarative_base()


class FlashcardRow(Base):
    """One stored flashcard and its current bucket."""

    __tablename__ = "flashcards"
    __table_args__ = (UniqueConstraint("front", "back", name="uq_flashcards_front_back"),)

    id = Column(Integer, primary_key=True, autoincrement=True)
    front = Column(Text, nullable=False)
    back = Column(Text, nullable=False)
    hint = Column(Text, nullable=True)
    tags = Column(Text, nullable=True)  # comma-joined
    scheduled_day = Column(Integer, nullable=False, default=0, server_default="0")

    records = relationship("PracticeRecordRow", back_populates="card")

    def __repr__(self):
        return f"<FlashcardRow(id={self.id}, {self.front!r}, day={self.scheduled_day})>"


class PracticeRecordRow(Base):
    """Log entry for one answered review."""

    __tablename__ = "practice_records"
    __table_args__ = (
        UniqueConstraint("card_id", "timestamp", name="uq_practice_records_card_timestamp"),
    )

    id = Column(Integer, primary_key=True, autoincrement=True)
    card_id = Column(Integer, ForeignKey("flashcards.id"), nullable=False, index=True)
    timestamp = Column(BigInteger, nullable=False)  # epoch ms
    difficulty = Column(Integer, nullable=False)  # 0=Wrong, 1=Hard, 2=Easy
    old_day = Column(Integer, nullable=False)
    new_day = Column(Integer, nullable=False)

    card = relationship("FlashcardRow", back_populates="records")

    def __repr__(self):
        return (
            f"<PracticeRecordRow(id={self.id}, card={self.card_id}, "
            f"{self.old_day}->{self.new_day})>"
        )
