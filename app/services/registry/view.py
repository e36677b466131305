"""Table view derivation - rows, count and empty state from the store."""

from app.models.registry import Member, MemberRow
from app.models.registry.labels import EMPTY_STATE, TABLE_TITLE


def build_rows(members: list[Member]) -> list[MemberRow]:
    return [
        MemberRow(
            id=m.id,
            index=i,
            full_name=m.full_name,
            ministry=m.ministry,
            department=m.department,
            party=m.party,
        )
        for i, m in enumerate(members)
    ]


def table_title(count: int) -> str:
    return TABLE_TITLE.format(count=count)


def empty_message(count: int) -> str | None:
    """Message to show instead of the table, if any."""
    return EMPTY_STATE if count == 0 else None
