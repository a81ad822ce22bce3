"""Split a raw owner name line into owner segments on '&' / 'AND'."""

import re
from typing import List

from owner_roster.utils.name_text import norm_space

_AND_WORD = re.compile(r"\s*\band\b\s*", re.IGNORECASE)
_AMPERSAND = re.compile(r"\s*&\s*")


def split_owner_line(line: str) -> List[str]:
    """
    Split one name line into ordered, trimmed, non-empty segments.

    "SMITH JOHN AND MARY & BOB" -> ["SMITH JOHN", "MARY", "BOB"]
    """
    if not line:
        return []
    cleaned = _AND_WORD.sub(" & ", line)
    segments = (norm_space(part) for part in _AMPERSAND.split(cleaned))
    return [s for s in segments if s]
