from collections.abc import Iterable

from leitner.domain.constants import TAG_SEPARATOR


def clean_field(value: str | None) -> str | None:
    """Strip surrounding whitespace; blank or missing becomes None."""
    if value is None:
        return None
    value = str(value).strip()
    return value or None


def split_tags(raw: str | Iterable[str] | None) -> tuple[str, ...]:
    """
    Normalize tags given either as a comma-joined string or a sequence.

    Whitespace is trimmed and empty entries are dropped; order is kept.
    """
    if raw is None:
        return ()
    if isinstance(raw, str):
        parts: Iterable[str] = raw.split(TAG_SEPARATOR)
    else:
        parts = (str(p) for p in raw)
    return tuple(p.strip() for p in parts if p and p.strip())


def join_tags(tags: Iterable[str]) -> str | None:
    """Comma-join tags for storage; no tags is stored as NULL."""
    tags = list(tags)
    if not tags:
        return None
    return TAG_SEPARATOR.join(tags)
