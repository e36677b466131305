"""Registry domain entities - validation results and table rows."""

from dataclasses import dataclass, field

from app.models.common import BaseEntity


@dataclass
class ValidationResult(BaseEntity):
    """Outcome of validating one set of form values."""

    valid: bool
    field_errors: dict[str, str] = field(default_factory=dict)


@dataclass
class MemberRow(BaseEntity):
    """One rendered table row."""

    id: str
    index: int
    full_name: str
    ministry: str
    department: str
    party: str


@dataclass
class SubmitResult(BaseEntity):
    """Outcome of one form submission."""

    saved: bool
    updated: bool = False
    member_id: str | None = None
    index: int | None = None
    field_errors: dict[str, str] = field(default_factory=dict)
