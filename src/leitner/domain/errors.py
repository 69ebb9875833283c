"""
Error taxonomy for the Leitner engine.

Pure scheduling functions never raise these for well-formed input. They are
raised at the boundary (service, repository, CLI) before or after the core runs.
"""


class LeitnerError(Exception):
    """Base class for every error raised by this package."""


class InvalidInputError(LeitnerError, ValueError):
    """A scheduling parameter or card field failed validation."""


class MalformedRowError(LeitnerError):
    """A stored row is missing a required field and cannot be loaded."""


class StoreUnavailableError(LeitnerError):
    """The backing store could not be reached."""


class CardNotFoundError(LeitnerError, LookupError):
    """No card with the given front/back exists in the store."""

    def __init__(self, front: str, back: str):
        super().__init__(f"Card not found: {front!r} / {back!r}")
        self.front = front
        self.back = back


class ConflictError(LeitnerError):
    """A write was rejected because it conflicts with stored state."""


class DuplicateEventError(ConflictError):
    """A practice record for the same card and timestamp already exists."""


class DuplicateCardError(ConflictError):
    """A card with the same front/back already exists."""


class StaleBucketError(ConflictError):
    """The card moved since it was read; the answer was not applied."""
