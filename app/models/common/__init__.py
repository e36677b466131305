"""Common models - base classes and shared tables."""

from app.models.common.base import BaseEntity
from app.models.common.kv import KV_DDL

__all__ = [
    "BaseEntity",
    "KV_DDL",
]
