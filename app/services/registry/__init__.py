"""Registry services - form controller, collection store and table view."""

from app.services.registry.errors import MemberNotFoundError, SnapshotError
from app.services.registry.form import FormState, empty_values, validate
from app.services.registry.service import RegistryService
from app.services.registry.store import MemberStore, decode_snapshot, dump_snapshot, parse_snapshot
from app.services.registry.view import build_rows, empty_message, table_title

__all__ = [
    "FormState",
    "MemberStore",
    "RegistryService",
    "MemberNotFoundError",
    "SnapshotError",
    "build_rows",
    "decode_snapshot",
    "dump_snapshot",
    "empty_message",
    "empty_values",
    "parse_snapshot",
    "table_title",
    "validate",
]
