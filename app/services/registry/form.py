"""Form controller state and validation."""

from dataclasses import dataclass, field

from pydantic import ValidationError

from app.models.registry import FORM_FIELDS, Member, ValidationResult, field_name


def empty_values() -> dict[str, str | None]:
    values: dict[str, str | None] = {name: "" for name in FORM_FIELDS}
    values["photo"] = None
    return values


def validate(values: dict) -> ValidationResult:
    """Check required fields; returns one message per failing field."""
    try:
        Member.model_validate(values)
    except ValidationError as exc:
        errors: dict[str, str] = {}
        for err in exc.errors():
            name = field_name(err["loc"][0]) if err["loc"] else "form"
            errors.setdefault(name, err["msg"])
        return ValidationResult(valid=False, field_errors=errors)
    return ValidationResult(valid=True)


@dataclass
class FormState:
    """Per-session form state: field values, inline errors and the edit target.

    ``version`` changes whenever values are replaced wholesale (reset,
    prefill) so bound widgets can be re-created with the new values.
    """

    values: dict[str, str | None] = field(default_factory=empty_values)
    errors: dict[str, str] = field(default_factory=dict)
    edit_target: str | None = None
    version: int = 0

    @property
    def editing(self) -> bool:
        return self.edit_target is not None

    def update(self, values: dict) -> None:
        self.values.update({k: v for k, v in values.items() if k in FORM_FIELDS})

    def reset(self) -> None:
        """Clear values and errors. The edit target is left as is."""
        self.values = empty_values()
        self.errors = {}
        self.version += 1

    def prefill(self, member: Member) -> None:
        self.values = {name: getattr(member, name) for name in FORM_FIELDS}
        self.errors = {}
        self.edit_target = member.id
        self.version += 1

    def clear_edit(self) -> None:
        self.edit_target = None
