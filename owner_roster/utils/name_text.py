"""
Owner name text helpers.

Whitespace collapsing and the light cleanup applied to a person segment
before its tokens are read (periods dropped, trailing ET AL removed).
"""

import re
from typing import List

_WHITESPACE = re.compile(r"\s+")
_ET_AL_SUFFIX = re.compile(r"\s+ET\s+AL.?$", re.IGNORECASE)


def norm_space(text: str | None) -> str:
    """Collapse runs of whitespace to one space and trim."""
    return _WHITESPACE.sub(" ", text or "").strip()


def clean_person_segment(segment: str) -> str:
    """
    Normalize a person segment for tokenizing.

    "SMITH J. ET AL" -> "SMITH J"
    """
    text = norm_space(segment).replace(".", "")
    return _ET_AL_SUFFIX.sub("", text).strip()


def tokens(text: str) -> List[str]:
    return [t for t in text.split(" ") if t]
