"""
Repository Factory
Centralizes construction of the storage adapter and the practice service.
"""

import logging
from pathlib import Path

from sqlalchemy.engine import make_url
from sqlalchemy.exc import ArgumentError

from leitner.application.config import AppConfig
from leitner.application.service import PracticeService
from leitner.domain.errors import InvalidInputError, StoreUnavailableError
from leitner.domain.ports import FlashcardRepository
from leitner.infrastructure.persistence.repository import SqlFlashcardRepository

logger = logging.getLogger(__name__)


def get_repository(config: AppConfig) -> SqlFlashcardRepository:
    """
    Returns a SQL repository for the configured database, with its schema created.
    """
    try:
        url = make_url(config.database_url)
    except ArgumentError as e:
        raise InvalidInputError(f"Invalid database URL: {e}") from e
    # SQLite will not create missing parent directories on its own.
    if url.get_backend_name() == "sqlite" and url.database not in (None, "", ":memory:"):
        try:
            Path(url.database).expanduser().parent.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise StoreUnavailableError(f"Cannot create database directory: {e}") from e

    logger.debug(f"Opening store {url.render_as_string(hide_password=True)}")
    repo = SqlFlashcardRepository(config.database_url, echo=config.echo_sql)
    try:
        repo.create_schema()
    except StoreUnavailableError:
        repo.close()
        raise
    return repo


def get_practice_service(
    config: AppConfig, repository: FlashcardRepository | None = None
) -> PracticeService:
    """
    Returns a PracticeService over the given repository, or over one built from config.
    """
    return PracticeService(repository or get_repository(config))
