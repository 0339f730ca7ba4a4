import re
from typing import Any, Optional

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def parse_book_id(raw: str) -> Optional[int]:
    """
    Parse a path id the lenient way: leading digits are taken, trailing junk
    is ignored ("12abc" -> 12). Returns None when there are no digits or the
    value is 0.
    """
    match = _LEADING_INT.match(raw or "")
    if not match:
        return None
    value = int(match.group(1))
    return value or None


def has_required(*values: Any) -> bool:
    """True when every value is present and non-empty (None, "" and 0 count as missing)"""
    return all(values)
