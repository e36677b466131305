"""Member collection store - ordered in-memory list with write-through persistence."""

import json
import threading

from loguru import logger
from pydantic import ValidationError

from app.models.registry import Member, new_member_id
from app.repositories.common.kv import KeyValueRepository
from app.services.registry.errors import MemberNotFoundError, SnapshotError
from settings import CORRUPT_SUFFIX, STORE_KEY


def decode_snapshot(raw: str) -> list:
    """Decode stored snapshot text into its raw record list."""
    try:
        data = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise SnapshotError(f"Snapshot is not valid JSON: {exc.msg}") from exc

    if not isinstance(data, list):
        raise SnapshotError(f"Snapshot must be a JSON array, got {type(data).__name__}")
    return data


def parse_snapshot(data: list) -> list[Member]:
    """Validate raw records into members, in order."""
    members = []
    for i, item in enumerate(data):
        try:
            members.append(Member.model_validate(item))
        except ValidationError as exc:
            raise SnapshotError(f"Invalid member at position {i}: {exc.error_count()} error(s)") from exc
    return members


def dump_snapshot(members: list[Member]) -> list[dict]:
    return [m.to_snapshot() for m in members]


def reassign_duplicate_ids(members: list[Member]) -> int:
    """Give every repeated id after its first occurrence a fresh one, in place."""
    seen: set[str] = set()
    reassigned = 0
    for i, member in enumerate(members):
        if member.id in seen:
            members[i] = member.model_copy(update={"id": new_member_id()})
            reassigned += 1
        seen.add(members[i].id)
    return reassigned


class MemberStore:
    """Canonical ordered sequence of members.

    Every mutation writes the full snapshot before the in-memory list is
    swapped, so the stored snapshot and ``members`` never diverge. The store
    is shared by all sessions; the lock serializes read-modify-write cycles.
    """

    def __init__(self, kv: KeyValueRepository, key: str = STORE_KEY):
        self._kv = kv
        self._key = key
        self._members: list[Member] = []
        self._lock = threading.RLock()

    @property
    def key(self) -> str:
        return self._key

    @property
    def members(self) -> list[Member]:
        return list(self._members)

    def __len__(self) -> int:
        return len(self._members)

    def load(self) -> list[Member]:
        """Read the snapshot. Absent means empty; malformed is set aside and treated as empty."""
        with self._lock:
            raw = self._kv.get_raw(self._key)
            if raw is None:
                logger.info("No snapshot under '{}', starting empty", self._key)
                self._members = []
                return self.members

            try:
                data = decode_snapshot(raw)
                members = parse_snapshot(data)
            except SnapshotError as exc:
                backup = self._key + CORRUPT_SUFFIX
                self._kv.set_raw(backup, raw)
                logger.warning("{}. Copied to '{}', starting empty", exc.message, backup)
                self._members = []
                return self.members

            # ids were added after the first snapshots; store the generated ones
            missing = sum(1 for item in data if isinstance(item, dict) and "id" not in item)
            repeated = reassign_duplicate_ids(members)
            self._members = members
            if missing or repeated:
                logger.info("Assigned ids on load: {} missing, {} repeated", missing, repeated)
                self.persist()

            logger.info("Loaded {} members from '{}'", len(self._members), self._key)
            return self.members

    def persist(self) -> None:
        """Write the whole current sequence as one snapshot."""
        with self._lock:
            self._write(self._members)

    def get(self, member_id: str) -> Member:
        members = self._members
        return members[self._find(members, member_id)]

    def at(self, index: int) -> Member:
        members = self._members
        self._check_index(members, index)
        return members[index]

    def index_of(self, member_id: str) -> int:
        return self._find(self._members, member_id)

    def append(self, member: Member) -> int:
        """Add at the end; returns the new index."""
        with self._lock:
            self._commit([*self._members, member])
            index = len(self._members) - 1
        logger.info("Member added at {}: {}", index, member.full_name)
        return index

    def replace(self, member_id: str, member: Member) -> int:
        """Overwrite the member with this id, keeping the id."""
        if member.id != member_id:
            member = member.model_copy(update={"id": member_id})
        with self._lock:
            index = self.index_of(member_id)
            self._replace(index, member)
        return index

    def replace_at(self, index: int, member: Member) -> None:
        with self._lock:
            self._check_index(self._members, index)
            self._replace(index, member)

    def remove(self, member_id: str) -> Member:
        with self._lock:
            return self._remove(self.index_of(member_id))

    def remove_at(self, index: int) -> Member:
        with self._lock:
            self._check_index(self._members, index)
            return self._remove(index)

    def replace_all(self, members: list[Member]) -> None:
        with self._lock:
            self._commit(list(members))
        logger.info("Collection replaced: {} members", len(members))

    def _replace(self, index: int, member: Member) -> None:
        updated = self.members
        updated[index] = member
        self._commit(updated)
        logger.info("Member updated at {}: {}", index, member.full_name)

    def _remove(self, index: int) -> Member:
        updated = self.members
        removed = updated.pop(index)
        self._commit(updated)
        logger.info("Member removed from {}: {}", index, removed.full_name)
        return removed

    def _commit(self, members: list[Member]) -> None:
        self._write(members)
        self._members = members

    def _write(self, members: list[Member]) -> None:
        with self._kv.transaction():
            self._kv.set(self._key, dump_snapshot(members))

    @staticmethod
    def _find(members: list[Member], member_id: str) -> int:
        for i, member in enumerate(members):
            if member.id == member_id:
                return i
        raise MemberNotFoundError(member_id)

    @staticmethod
    def _check_index(members: list[Member], index: int) -> None:
        if not 0 <= index < len(members):
            raise MemberNotFoundError(index)
