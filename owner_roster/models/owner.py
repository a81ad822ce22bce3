from enum import StrEnum
from typing import Annotated, Any, Dict, Literal, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, field_validator


class ReasonCode(StrEnum):
    """Why a segment could not be resolved into an owner."""
    EMPTY_SEGMENT = "empty_segment"
    MISSING_FIRST_OR_LAST = "missing_first_or_last"
    MISSING_FIRST_NAME = "missing_first_name"
    UNPARSABLE_PERSON_SEGMENT = "unparsable_person_segment"


class Person(BaseModel):
    model_config = ConfigDict(frozen=True)

    type: Literal["person"] = "person"
    first_name: str
    last_name: str
    middle_name: Optional[str] = None

    @field_validator("first_name", "last_name")
    @classmethod
    def require_name(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("first_name and last_name must not be empty")
        return v

    @field_validator("middle_name", mode="before")
    @classmethod
    def blank_middle_to_none(cls, v: Any) -> Optional[str]:
        if v is None or not str(v).strip():
            return None
        return v


class Company(BaseModel):
    model_config = ConfigDict(frozen=True)

    type: Literal["company"] = "company"
    name: str

    @field_validator("name")
    @classmethod
    def require_name(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("company name must not be empty")
        return v


Owner = Annotated[Union[Person, Company], Field(discriminator="type")]

_OWNER_ADAPTER: TypeAdapter[Owner] = TypeAdapter(Owner)


class InvalidOwner(BaseModel):
    model_config = ConfigDict(frozen=True)

    raw: str
    reason: ReasonCode


class Roster(BaseModel):
    """Distinct owners (first-seen order) plus every segment that failed to resolve."""
    model_config = ConfigDict(frozen=True)

    owners: Tuple[Owner, ...] = ()
    invalid: Tuple[InvalidOwner, ...] = ()

    def to_dict(self) -> Dict[str, Any]:
        return {
            "owners": [owner_to_dict(o) for o in self.owners],
            "invalid": [i.model_dump(mode="json") for i in self.invalid],
        }


def owner_to_dict(owner: Union[Person, Company]) -> Dict[str, Any]:
    """Serialize an owner to its JSON shape (``middle_name`` omitted when absent)."""
    return owner.model_dump(mode="json", exclude_none=True)


def owner_from_dict(data: Dict[str, Any]) -> Union[Person, Company]:
    return _OWNER_ADAPTER.validate_python(data)
