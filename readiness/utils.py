import logging
import math
from typing import Any, Iterable, List, Optional

logger = logging.getLogger(__name__)

PLACEHOLDER_VALUES = frozenset({"not specified", "not provided"})


def is_absent(value: Any) -> bool:
    """Return True when a profile value should be treated as missing.

    Absent values are None, blank strings, the placeholder strings
    "Not specified" / "Not provided" (any case) and empty collections.
    Booleans and numbers are always present, including False and 0.
    """
    if value is None:
        return True
    if isinstance(value, str):
        stripped = value.strip()
        return not stripped or stripped.lower() in PLACEHOLDER_VALUES
    if isinstance(value, (list, tuple, set, frozenset, dict)):
        return len(value) == 0
    return False


def is_present(value: Any) -> bool:
    return not is_absent(value)


def clamp(x: float, lo: float, hi: float) -> float:
    return max(lo, min(hi, x))


def round_half_up(x: float) -> int:
    """Round .5 away from zero for positive values (the engine never rounds negatives)."""
    return int(math.floor(x + 0.5))


def clamp_score(x: float) -> int:
    """Clamp a point total into an integer score in [0, 100]."""
    return int(clamp(round_half_up(x), 0, 100))


def text_of(value: Any) -> str:
    """Lower-cased text of a present string value, '' otherwise."""
    if is_absent(value) or not isinstance(value, str):
        return ""
    return value.strip().lower()


def contains_any(text: Optional[str], keywords: Iterable[str]) -> bool:
    """Case-insensitive substring test of any keyword inside text."""
    haystack = text_of(text)
    if not haystack:
        return False
    return any(keyword.lower() in haystack for keyword in keywords)


def matching_items(items: Optional[Iterable[str]], keywords: Iterable[str]) -> List[str]:
    """Items that contain at least one keyword (case-insensitive), in input order."""
    keywords = tuple(keywords)
    return [item for item in (items or []) if contains_any(item, keywords)]


def distinct(*groups: Optional[Iterable[str]]) -> List[str]:
    """Order-preserving union of string lists, de-duplicated case-insensitively."""
    seen = set()
    merged = []
    for group in groups:
        for item in group or []:
            key = item.strip().lower()
            if key and key not in seen:
                seen.add(key)
                merged.append(item)
    return merged


def join_preview(items: Iterable[str], limit: Optional[int] = None) -> str:
    """Comma-joined preview of the first `limit` items."""
    items = list(items)
    if limit is not None:
        items = items[:limit]
    return ", ".join(items)
