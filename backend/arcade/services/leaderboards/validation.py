import math
import re
from numbers import Number
from typing import Any, Optional

DEFAULT_NAME = 'Player'
MAX_NAME_LENGTH = 12
DEFAULT_LIMIT = 5
MAX_LIMIT = 20
# Largest value the BIGINT score column holds
MAX_SCORE = 2 ** 63 - 1
# SQLite binds OFFSET as a signed 64-bit integer
MAX_OFFSET = 2 ** 63 - 1

_LEADING_INT = re.compile(r'^\s*([+-]?\d+)')
# Plain decimal or exponent notation only; no underscores, hex or inf/nan words
_NUMERIC = re.compile(r'^\s*[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?\s*$', re.ASCII)


def sanitize_name(name: Any) -> str:
    """Trim and truncate a display name, falling back to ``Player``."""
    if not name:
        return DEFAULT_NAME
    # Lone surrogates cannot be stored as UTF-8
    text = str(name).encode('utf-8', 'ignore').decode('utf-8')
    return text.strip()[:MAX_NAME_LENGTH] or DEFAULT_NAME


def parse_score(score: Any) -> Optional[int]:
    """Return the floored, non-negative integer score or None if invalid.

    Accepts ints, floats and numeric strings. Booleans, blanks, NaN,
    infinities and negatives are rejected.
    """
    if score is None or isinstance(score, bool):
        return None
    if isinstance(score, int):
        value = score
    elif isinstance(score, (Number, str)):
        if isinstance(score, str) and not _NUMERIC.match(score):
            return None
        try:
            parsed = float(score)
        except (TypeError, ValueError):
            return None
        if not math.isfinite(parsed):
            return None
        value = math.floor(parsed)
    else:
        return None
    if value < 0 or value > MAX_SCORE:
        return None
    return value


def _parse_int(value: Any) -> Optional[int]:
    if value is None:
        return None
    match = _LEADING_INT.match(str(value))
    return int(match.group(1)) if match else None


def clamp_limit(value: Any) -> int:
    # Zero and unparsable values fall back to the default before clamping
    limit = _parse_int(value) or DEFAULT_LIMIT
    return min(max(limit, 1), MAX_LIMIT)


def clamp_offset(value: Any) -> int:
    return min(max(_parse_int(value) or 0, 0), MAX_OFFSET)
