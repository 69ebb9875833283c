"""
Loading card decks from YAML.

A deck file looks like:

    cards:
      - front: Known as 'Bones'
        back: Jon Jones
        hint: Master of the oblique kick.
        tags: [ufc, fighter]

Tags may also be a comma-joined string. `hint` and `tags` are optional.
"""

import logging
from importlib import resources
from pathlib import Path
from typing import Any

import yaml

from leitner.application.utils.text import clean_field, split_tags
from leitner.domain.constants import STARTER_DECK_RESOURCE
from leitner.domain.errors import InvalidInputError
from leitner.domain.models import Flashcard

logger = logging.getLogger(__name__)


def parse_deck(text: str, source: str = "<deck>") -> list[Flashcard]:
    """
    Parse deck YAML into flashcards.

    Raises:
        InvalidInputError: The YAML is invalid or a card lacks front/back.
    """
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise InvalidInputError(f"{source}: invalid YAML: {e}") from e

    if data is None:
        return []
    if isinstance(data, dict):
        entries = data.get("cards", [])
    else:
        entries = data
    if not isinstance(entries, list):
        raise InvalidInputError(f"{source}: 'cards' must be a list")

    cards: list[Flashcard] = []
    for index, entry in enumerate(entries):
        cards.append(_card_from_entry(entry, f"{source}#{index}"))

    logger.debug(f"Parsed {len(cards)} cards from {source}")
    return cards


def _card_from_entry(entry: Any, where: str) -> Flashcard:
    if not isinstance(entry, dict):
        raise InvalidInputError(f"{where}: card must be a mapping")

    front = clean_field(entry.get("front"))
    back = clean_field(entry.get("back"))
    if front is None or back is None:
        raise InvalidInputError(f"{where}: card must have a front and back")

    return Flashcard(
        front=front,
        back=back,
        hint=clean_field(entry.get("hint")),
        tags=split_tags(entry.get("tags")),
    )


def load_deck(path: Path) -> list[Flashcard]:
    """Read and parse a deck file."""
    return parse_deck(path.read_text(encoding="utf-8"), source=str(path))


def load_starter_deck() -> list[Flashcard]:
    """The deck bundled with the package, used to seed a fresh database."""
    text = (
        resources.files("leitner.data")
        .joinpath(STARTER_DECK_RESOURCE)
        .read_text(encoding="utf-8")
    )
    return parse_deck(text, source=STARTER_DECK_RESOURCE)
