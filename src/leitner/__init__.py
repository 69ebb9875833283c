"""leitner: Leitner-box spaced repetition scheduling."""

from leitner.consts import VERSION

__version__ = VERSION
