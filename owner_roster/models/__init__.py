from owner_roster.models.owner import (
    Company,
    InvalidOwner,
    Owner,
    Person,
    ReasonCode,
    Roster,
    owner_from_dict,
    owner_to_dict,
)

__all__ = [
    "Company",
    "InvalidOwner",
    "Owner",
    "Person",
    "ReasonCode",
    "Roster",
    "owner_from_dict",
    "owner_to_dict",
]
