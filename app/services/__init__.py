"""Services package - service class exports."""

from app.services.registry import MemberStore, RegistryService

__all__ = [
    "MemberStore",
    "RegistryService",
]
