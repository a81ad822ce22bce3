"""
Roster Assembler.

Collects resolved owners for one document, dropping repeats by a
case-insensitive key, and keeps every invalid segment for review.
One assembler per document: sharing it would hide legitimately repeated
owners of different properties.
"""

from typing import List, Set, Union

from owner_roster.models.owner import Company, InvalidOwner, Person, Roster
from owner_roster.utils.name_text import norm_space


def owner_key(owner: Union[Person, Company]) -> str:
    """
    Build the deduplication key for an owner.

    Company("ABC  Holdings LLC") -> "company|abc holdings llc"
    Person(JOHN, SMITH)          -> "person|john||smith"
    """
    if isinstance(owner, Company):
        return f"company|{norm_space(owner.name).lower()}"
    first = owner.first_name.lower().strip()
    middle = (owner.middle_name or "").lower().strip()
    last = owner.last_name.lower().strip()
    return f"person|{first}|{middle}|{last}"


class RosterAssembler:
    def __init__(self) -> None:
        self._seen: Set[str] = set()
        self._owners: List[Union[Person, Company]] = []
        self._invalid: List[InvalidOwner] = []

    def add_owner(self, owner: Union[Person, Company]) -> bool:
        """Append the owner if its key is new. Returns False for a duplicate."""
        key = owner_key(owner)
        if key in self._seen:
            return False
        self._seen.add(key)
        self._owners.append(owner)
        return True

    def add_invalid(self, invalid: InvalidOwner) -> None:
        self._invalid.append(invalid)

    def build(self) -> Roster:
        return Roster(owners=tuple(self._owners), invalid=tuple(self._invalid))
