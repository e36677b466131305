"""Registry API response schemas."""

from pydantic import BaseModel


class MemberRowItem(BaseModel):
    """One table row."""

    id: str
    index: int
    full_name: str
    ministry: str
    department: str
    party: str


class MembersResponse(BaseModel):
    """Members table response."""

    items: list[MemberRowItem]
    total: int
    title: str
    empty_message: str | None


class MemberDetail(BaseModel):
    """Full member record, as loaded into the form for editing."""

    id: str
    prefix: str
    first_name: str
    last_name: str
    ministry: str
    department: str
    history: str
    works: str
    party: str
    photo: str | None


class SubmitResponse(BaseModel):
    """Form submission result."""

    saved: bool
    updated: bool = False
    member_id: str | None = None
    index: int | None = None
    field_errors: dict[str, str] = {}
    message: str | None = None


class DeleteResponse(BaseModel):
    """Deletion result."""

    removed_id: str
    total: int
    edit_cancelled: bool
