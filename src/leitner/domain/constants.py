"""Centralized constants for the Leitner application.

All magic numbers and configuration defaults live here so every layer
imports from a single source of truth.
"""

# ---------- Scheduling ----------
NEW_CARD_BUCKET = 0

# ---------- Cards ----------
NO_HINT_MESSAGE = "No hint available for this card."
TAG_SEPARATOR = ","

# ---------- Configuration ----------
ENV_PREFIX = "LEITNER_"
CONFIG_DIRNAME = ".config/leitner"
CONFIG_FILENAME = "config.toml"
LEGACY_CONFIG_FILENAME = ".leitner.toml"
DEFAULT_DB_FILENAME = "flashcards.db"

# ---------- Decks ----------
STARTER_DECK_RESOURCE = "starter_deck.yaml"
