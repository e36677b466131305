"""Member (legislative profile) model and its validation rules."""

import uuid

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator
from pydantic_core import PydanticCustomError

from app.models.registry.labels import REQUIRED_MESSAGES

REQUIRED_FIELDS = ("prefix", "first_name", "last_name")
OPTIONAL_FIELDS = ("ministry", "department", "history", "works", "party")
FORM_FIELDS = REQUIRED_FIELDS + OPTIONAL_FIELDS + ("photo",)


def new_member_id() -> str:
    return uuid.uuid4().hex


class Member(BaseModel):
    """One legislative-member profile.

    Serialized with camelCase keys (``firstName``, ``lastName``) so stored
    snapshots keep the browser-era format.
    """

    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(default_factory=new_member_id)
    prefix: str = Field(default="", validate_default=True)
    first_name: str = Field(alias="firstName", default="", validate_default=True)
    last_name: str = Field(alias="lastName", default="", validate_default=True)
    ministry: str = ""
    department: str = ""
    history: str = ""
    works: str = ""
    party: str = ""
    photo: str | None = None

    @field_validator(*REQUIRED_FIELDS, mode="before")
    @classmethod
    def _required(cls, value, info: ValidationInfo) -> str:
        if value is None or not str(value).strip():
            raise PydanticCustomError("required", REQUIRED_MESSAGES[info.field_name])
        return str(value).strip()

    @field_validator(*OPTIONAL_FIELDS, mode="before")
    @classmethod
    def _optional(cls, value) -> str:
        return "" if value is None else str(value)

    @field_validator("photo", mode="before")
    @classmethod
    def _photo(cls, value) -> str | None:
        # browser-era snapshots serialized the file input as {}
        return value if isinstance(value, str) and value else None

    @property
    def full_name(self) -> str:
        return f"{self.prefix} {self.first_name} {self.last_name}"

    def to_snapshot(self) -> dict:
        """Serialize using the stored (camelCase) keys."""
        return self.model_dump(by_alias=True)


# alias -> field name, for mapping pydantic error locations back to form fields
_FIELD_BY_ALIAS = {(f.alias or name): name for name, f in Member.model_fields.items()}


def field_name(loc: str | int) -> str:
    return _FIELD_BY_ALIAS.get(str(loc), str(loc))
