"""
Segment Classifier.

Decides whether an owner segment names a company or a natural person.
Matching is whole-word only: a keyword must be bounded by a non-letter or the
string edge, so keywords buried inside surnames ("CORPENING", "BANKS", "COOK")
never trigger, and dotted initials ("T.R.", "C.O.") stay separate letters.
"""

import re
from dataclasses import dataclass
from typing import Set, Union

from owner_roster.models.owner import Company
from owner_roster.services.company_keywords import COMPANY_KEYWORDS, DOTTED_COMPANY_KEYWORDS
from owner_roster.utils.name_text import norm_space

_LETTER_RUN = re.compile(r"[a-z]+")
_DOTTED_KEYWORDS = tuple(
    re.compile(rf"(^|[^a-z]){re.escape(kw)}([^a-z]|$)") for kw in DOTTED_COMPANY_KEYWORDS
)


@dataclass(frozen=True, slots=True)
class PersonCandidate:
    """A segment that is not a company and still needs name resolution."""
    text: str


def word_tokens(name: str) -> Set[str]:
    return set(_LETTER_RUN.findall(name.lower()))


def is_company_name(name: str) -> bool:
    if not name:
        return False
    lowered = name.lower()
    if not COMPANY_KEYWORDS.isdisjoint(word_tokens(lowered)):
        return True
    return any(pattern.search(lowered) for pattern in _DOTTED_KEYWORDS)


def classify_segment(segment: str) -> Union[Company, PersonCandidate]:
    text = norm_space(segment)
    if text and is_company_name(text):
        return Company(name=text)
    return PersonCandidate(text=text)
