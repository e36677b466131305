"""Registry domain models - members, photos, labels, and view entities."""

from app.models.registry.entities import MemberRow, SubmitResult, ValidationResult
from app.models.registry.member import (
    FORM_FIELDS,
    OPTIONAL_FIELDS,
    REQUIRED_FIELDS,
    Member,
    field_name,
    new_member_id,
)
from app.models.registry.photo import PHOTO_DDL

__all__ = [
    "Member",
    "MemberRow",
    "SubmitResult",
    "ValidationResult",
    "FORM_FIELDS",
    "REQUIRED_FIELDS",
    "OPTIONAL_FIELDS",
    "PHOTO_DDL",
    "field_name",
    "new_member_id",
]
