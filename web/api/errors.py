"""API errors and validation helpers."""


class NotFoundError(Exception):
    """Resource not found."""

    def __init__(self, message: str = "Resource not found"):
        self.message = message
        super().__init__(self.message)


class ValidationError(Exception):
    """Validation error, optionally with per-field messages."""

    def __init__(self, message: str = "Validation error", field_errors: dict[str, str] | None = None):
        self.message = message
        self.field_errors = field_errors or {}
        super().__init__(self.message)


def validate_member_id(member_id: str) -> None:
    """Validate a member id looks like one we generate."""
    if not member_id or not isinstance(member_id, str):
        raise ValidationError(f"Invalid member id: {member_id!r}")
