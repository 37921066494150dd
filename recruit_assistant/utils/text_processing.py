"""Small value helpers shared by enrichment, statistics and search."""

from collections.abc import Iterable
from typing import Any


def is_blank(value: Any) -> bool:
    """True for None, empty/whitespace strings and empty containers."""
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    if isinstance(value, (list, tuple, dict, set)):
        return len(value) == 0
    return False


def as_list(value: Any) -> list:
    """Coerce a loosely typed document value into a list.

    Lists and tuples are copied, comma separated strings are split,
    anything else becomes an empty list.
    """
    if isinstance(value, (list, tuple)):
        return list(value)
    if isinstance(value, str):
        return [part.strip() for part in value.split(",") if part.strip()]
    return []


def contains_ci(haystack: str | None, needle: str) -> bool:
    """Case-insensitive substring test that tolerates a missing haystack."""
    if not haystack:
        return False
    return needle.lower() in str(haystack).lower()


def unique_values(values: Iterable[Any]) -> list:
    """De-duplicate keeping first-seen order, dropping blank values."""
    seen = {}
    for value in values:
        if is_blank(value):
            continue
        try:
            seen.setdefault(value, None)
        except TypeError:
            # unhashable document fragments are skipped
            continue
    return list(seen)
