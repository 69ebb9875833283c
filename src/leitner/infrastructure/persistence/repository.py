"""
SQL Flashcard Repository — Infrastructure adapter for a relational store.

Implements FlashcardRepository with SQLAlchemy. Each card row keeps one
scheduled_day value; the bucket model is rebuilt from those on load.
"""

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any

from sqlalchemy import create_engine, func, select, update
from sqlalchemy.engine import Engine
from sqlalchemy.exc import ArgumentError, DBAPIError, IntegrityError
from sqlalchemy.orm import Session, sessionmaker

from leitner.application.buckets import buckets_from_schedule
from leitner.application.utils.text import join_tags, split_tags
from leitner.domain.errors import (
    CardNotFoundError,
    DuplicateCardError,
    DuplicateEventError,
    InvalidInputError,
    MalformedRowError,
    StaleBucketError,
    StoreUnavailableError,
)
from leitner.domain.models import (
    AnswerDifficulty,
    BucketMap,
    Flashcard,
    PracticeRecord,
)
from leitner.domain.ports import FlashcardRepository

from .tables import Base, FlashcardRow, PracticeRecordRow

logger = logging.getLogger(__name__)


def parse_flashcard(row: Any) -> Flashcard:
    """
    Parse a flashcards row into a Flashcard.

    Raises:
        MalformedRowError: The row is missing, or has no front or back.
    """
    if row is None:
        raise MalformedRowError("Null flashcard row cannot be parsed")
    if not row.front or not row.back:
        raise MalformedRowError("Flashcard row must have a front and back")
    return Flashcard(
        front=row.front,
        back=row.back,
        hint=row.hint or None,
        tags=split_tags(row.tags),
    )


def parse_practice_record(row: Any, card: Flashcard) -> PracticeRecord:
    """
    Parse a practice_records row for an already-parsed card.

    Raises:
        MalformedRowError: A stored value is out of range.
    """
    if row is None:
        raise MalformedRowError("Null practice record row cannot be parsed")
    try:
        return PracticeRecord(
            card_front=card.front,
            card_back=card.back,
            timestamp=row.timestamp,
            difficulty=row.difficulty,
            previous_bucket=row.old_day,
            new_bucket=row.new_day,
        )
    except InvalidInputError as e:
        raise MalformedRowError(f"Practice record {row.id}: {e}") from e


def _scheduled_day(row: FlashcardRow) -> int:
    day = row.scheduled_day
    if day is None or day < 0:
        raise MalformedRowError(f"Flashcard row {row.id} has invalid scheduled day {day!r}")
    return day


class SqlFlashcardRepository(FlashcardRepository):
    """
    Stores cards and practice history through SQLAlchemy.

    Can be used as a context manager; the engine is disposed on exit.
    """

    def __init__(
        self,
        database_url: str | None = None,
        engine: Engine | None = None,
        echo: bool = False,
    ):
        if engine is None:
            if database_url is None:
                raise ValueError("Either database_url or engine is required")
            try:
                engine = create_engine(database_url, echo=echo, pool_pre_ping=True)
            except ArgumentError as e:
                raise InvalidInputError(f"Invalid database URL: {e}") from e
            except ImportError as e:
                raise StoreUnavailableError(f"Database driver not installed: {e}") from e
        self.engine = engine
        self._sessions = sessionmaker(bind=engine, expire_on_commit=False)

    def __enter__(self) -> "SqlFlashcardRepository":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()

    def close(self) -> None:
        self.engine.dispose()

    @contextmanager
    def _session(self) -> Iterator[Session]:
        """
        One transaction. Commits on success, rolls back on any exception.

        Driver-level failures other than constraint violations are
        reported as StoreUnavailableError.
        """
        try:
            with self._sessions.begin() as session:
                yield session
        except IntegrityError:
            raise
        except DBAPIError as e:
            logger.error(f"Store unavailable: {e}")
            raise StoreUnavailableError(f"Database unreachable: {e.orig}") from e

    def create_schema(self) -> None:
        """Create the tables if they do not exist."""
        try:
            Base.metadata.create_all(self.engine)
        except DBAPIError as e:
            raise StoreUnavailableError(f"Database unreachable: {e.orig}") from e

    def load_bucket_model(self) -> BucketMap:
        with self._session() as session:
            max_day = session.scalar(select(func.max(FlashcardRow.scheduled_day)))
            rows = session.scalars(select(FlashcardRow).order_by(FlashcardRow.id)).all()
            schedule = [(parse_flashcard(row), _scheduled_day(row)) for row in rows]

        return buckets_from_schedule(schedule, max_day=max_day or 0)

    def load_history(self) -> list[PracticeRecord]:
        with self._session() as session:
            rows = session.execute(
                select(PracticeRecordRow, FlashcardRow)
                .join(FlashcardRow, PracticeRecordRow.card_id == FlashcardRow.id)
                .order_by(PracticeRecordRow.timestamp, PracticeRecordRow.id)
            ).all()
            return [
                parse_practice_record(record_row, parse_flashcard(card_row))
                for record_row, card_row in rows
            ]

    def find_card(self, front: str, back: str) -> Flashcard | None:
        with self._session() as session:
            row = self._find_row(session, front, back)
            return parse_flashcard(row) if row is not None else None

    def record_answer(
        self,
        card: Flashcard,
        previous_bucket: int,
        new_bucket: int,
        difficulty: AnswerDifficulty,
        timestamp: int,
    ) -> PracticeRecord:
        record = PracticeRecord(
            card_front=card.front,
            card_back=card.back,
            timestamp=timestamp,
            difficulty=difficulty,
            previous_bucket=previous_bucket,
            new_bucket=new_bucket,
        )

        with self._session() as session:
            card_id = session.scalar(
                select(FlashcardRow.id).where(
                    FlashcardRow.front == card.front, FlashcardRow.back == card.back
                )
            )
            if card_id is None:
                raise CardNotFoundError(card.front, card.back)

            # Guarded on the bucket that was read, so a concurrent answer
            # for the same card cannot be overwritten.
            result = session.execute(
                update(FlashcardRow)
                .where(
                    FlashcardRow.id == card_id,
                    FlashcardRow.scheduled_day == record.previous_bucket,
                )
                .values(scheduled_day=record.new_bucket)
            )
            if result.rowcount != 1:
                raise StaleBucketError(
                    f"{card.front!r} is no longer in bucket {record.previous_bucket}"
                )

            session.add(
                PracticeRecordRow(
                    card_id=card_id,
                    timestamp=record.timestamp,
                    difficulty=int(record.difficulty),
                    old_day=record.previous_bucket,
                    new_day=record.new_bucket,
                )
            )
            try:
                session.flush()
            except IntegrityError as e:
                raise DuplicateEventError(
                    f"Practice record for {card.front!r} at {record.timestamp} already exists"
                ) from e

        logger.debug(f"Recorded {record}")
        return record

    def append_flashcard(self, card: Flashcard) -> int:
        row = FlashcardRow(
            front=card.front,
            back=card.back,
            hint=card.hint,
            tags=join_tags(card.tags),
            scheduled_day=0,
        )
        with self._session() as session:
            session.add(row)
            try:
                session.flush()
            except IntegrityError as e:
                raise DuplicateCardError(
                    f"Card already exists: {card.front!r} / {card.back!r}"
                ) from e
            card_id = row.id

        logger.debug(f"Added card {card_id}: {card.front!r}")
        return card_id

    @staticmethod
    def _find_row(session: Session, front: str, back: str) -> FlashcardRow | None:
        return session.scalars(
            select(FlashcardRow).where(FlashcardRow.front == front, FlashcardRow.back == back)
        ).first()
