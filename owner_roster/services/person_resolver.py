"""
Person Name Resolver.

Assigns first/middle/last to a person segment. Name order cannot be known from
plain text, so a fixed chain of rules is tried from the most explicit signal
to the weakest convention:

1. comma form          "DOE, JANE M"     -> last=DOE first=JANE middle=M
2. inherited surname   "MARY" after SMITH -> first=MARY last=SMITH
3. surname first       "SMITH JOHN A"    -> last=SMITH first=JOHN middle=A
4. western order       "Robert A Jones"  -> first=Robert middle=A last=Jones

The first rule whose predicate holds decides the outcome, even when that
outcome is a failure. A segment no rule accepts is unparsable.

Mixed-case surname-first text ("Smith John") falls through to western order
and reads as first=Smith last=John. That is a known ambiguity of the source
data and is left as is.
"""

from dataclasses import dataclass
from typing import Callable, List, Optional, Tuple, Union

from loguru import logger

from owner_roster.models.owner import InvalidOwner, Person, ReasonCode
from owner_roster.utils.name_text import clean_person_segment, norm_space, tokens

# A rule yields a Person or the reason it could not build one
Resolution = Union[Person, ReasonCode]
Predicate = Callable[[str, List[str], Optional[str]], bool]
Resolver = Callable[[str, List[str], Optional[str]], Resolution]


@dataclass(frozen=True, slots=True)
class NameRule:
    name: str
    applies: Predicate
    resolve: Resolver


def _person(first: str, last: str, middle: str = "") -> Person:
    return Person(first_name=first, last_name=last, middle_name=middle or None)


# -----------------------------------------------------------------------------
# Rule 1: LAST, FIRST [MIDDLE...]
# -----------------------------------------------------------------------------

def has_comma(text: str, toks: List[str], prior_last_name: Optional[str]) -> bool:
    return "," in text


def resolve_comma_form(text: str, toks: List[str], prior_last_name: Optional[str]) -> Resolution:
    # Only the text up to a second comma is read ("DOE, JANE, JR" drops "JR")
    parts = text.split(",")
    last = norm_space(parts[0])
    given = tokens(norm_space(parts[1]))
    first = given[0] if given else ""
    if not first or not last:
        return ReasonCode.MISSING_FIRST_OR_LAST
    return _person(first, last, " ".join(given[1:]))


# -----------------------------------------------------------------------------
# Rule 2: given names only, surname carried from the previous segment
# -----------------------------------------------------------------------------

def can_inherit_surname(text: str, toks: List[str], prior_last_name: Optional[str]) -> bool:
    return bool(prior_last_name) and len(toks) <= 2


def resolve_inherited_surname(text: str, toks: List[str], prior_last_name: Optional[str]) -> Resolution:
    if not toks:
        return ReasonCode.MISSING_FIRST_NAME
    middle = toks[1] if len(toks) > 1 else ""
    return _person(toks[0], prior_last_name or "", middle)


# -----------------------------------------------------------------------------
# Rule 3: all caps, LAST FIRST [MIDDLE...]
# -----------------------------------------------------------------------------

def is_all_caps(text: str, toks: List[str], prior_last_name: Optional[str]) -> bool:
    return len(toks) >= 2 and all(t == t.upper() for t in toks)


def resolve_surname_first(text: str, toks: List[str], prior_last_name: Optional[str]) -> Resolution:
    return _person(toks[1], toks[0], " ".join(toks[2:]))


# -----------------------------------------------------------------------------
# Rule 4: FIRST [MIDDLE...] LAST
# -----------------------------------------------------------------------------

def has_two_tokens(text: str, toks: List[str], prior_last_name: Optional[str]) -> bool:
    return len(toks) >= 2


def resolve_western_order(text: str, toks: List[str], prior_last_name: Optional[str]) -> Resolution:
    first, last = toks[0], toks[-1]
    if not first or not last:
        return ReasonCode.MISSING_FIRST_OR_LAST
    return _person(first, last, " ".join(toks[1:-1]))


NAME_RULES: Tuple[NameRule, ...] = (
    NameRule("comma_form", has_comma, resolve_comma_form),
    NameRule("inherited_surname", can_inherit_surname, resolve_inherited_surname),
    NameRule("surname_first", is_all_caps, resolve_surname_first),
    NameRule("western_order", has_two_tokens, resolve_western_order),
)


def resolve_person(segment: str, prior_last_name: Optional[str] = None) -> Union[Person, InvalidOwner]:
    """
    Resolve a person segment into a Person, or an InvalidOwner with a reason.

    Args:
        segment: owner segment already classified as not-a-company
        prior_last_name: surname of the previous person segment on the same line

    Returns:
        Person on success, InvalidOwner(raw=segment, reason=...) otherwise
    """
    text = clean_person_segment(segment)
    if not text:
        return InvalidOwner(raw=segment, reason=ReasonCode.EMPTY_SEGMENT)

    toks = tokens(text)
    outcome: Resolution = ReasonCode.UNPARSABLE_PERSON_SEGMENT
    for rule in NAME_RULES:
        if rule.applies(text, toks, prior_last_name):
            outcome = rule.resolve(text, toks, prior_last_name)
            logger.debug("Name rule {rule} matched {segment!r}", rule=rule.name, segment=segment)
            break

    if isinstance(outcome, ReasonCode):
        return InvalidOwner(raw=segment, reason=outcome)
    return outcome
