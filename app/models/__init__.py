"""Models package - DDL and entities for all domains."""

from app.models.common import KV_DDL, BaseEntity
from app.models.registry import (
    PHOTO_DDL,
    Member,
    MemberRow,
    ValidationResult,
)

ALL_DDL = [
    # Common
    KV_DDL,
    # Registry
    PHOTO_DDL,
]

__all__ = [
    # Common
    "BaseEntity",
    "KV_DDL",
    # Registry
    "PHOTO_DDL",
    "Member",
    "MemberRow",
    "ValidationResult",
    # All DDL
    "ALL_DDL",
]
