#!/usr/bin/env python3
"""
Maintain the member registry from the command line.

Usage:
    python manage_registry.py list                  # Print the members table
    python manage_registry.py export members.json   # Write the snapshot to a file
    python manage_registry.py export-csv table.csv  # Write the display table as CSV
    python manage_registry.py import members.json   # Replace the collection from a file
    python manage_registry.py validate              # Check the stored snapshot
"""

import json
import sys
from pathlib import Path

# Add project to path
sys.path.insert(0, str(Path(__file__).parent))

import duckdb
import polars as pl
from loguru import logger

from app.container import container
from app.repositories.common.kv import KeyValueRepository
from app.repositories.db import close_db, db_exists
from app.services.registry import SnapshotError, decode_snapshot, validate
from settings import DB_PATH, STORE_KEY
from settings.logging import setup_logging
from web.api import registry
from web.api.errors import ValidationError


def members_frame() -> pl.DataFrame:
    """Display table as a DataFrame."""
    rows = registry.list_members().items
    return pl.DataFrame(
        {
            "full_name": [r.full_name for r in rows],
            "ministry": [r.ministry for r in rows],
            "department": [r.department for r in rows],
            "party": [r.party for r in rows],
        },
        schema={"full_name": pl.Utf8, "ministry": pl.Utf8, "department": pl.Utf8, "party": pl.Utf8},
    )


def run_list():
    resp = registry.list_members()
    print(f"\n{resp.title}")
    print("=" * 60)
    if resp.empty_message:
        print(resp.empty_message)
    for row in resp.items:
        extras = " | ".join(v for v in (row.ministry, row.department, row.party) if v)
        print(f"{row.index + 1:>3}. {row.full_name}" + (f"  ({extras})" if extras else ""))
    print()


def run_export(path: Path):
    data = registry.export_members()
    path.write_text(json.dumps(data, ensure_ascii=False, indent=2), encoding="utf-8")
    logger.info("Exported {} members to {}", len(data), path)


def run_export_csv(path: Path):
    df = members_frame()
    df.write_csv(path)
    logger.info("Exported {} rows to {}", df.height, path)


def run_import(path: Path) -> bool:
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        logger.error("Cannot read {}: {}", path, exc)
        return False

    try:
        records = json.loads(text)
    except json.JSONDecodeError as exc:
        logger.error("{} is not valid JSON: {}", path, exc.msg)
        return False

    try:
        count = registry.import_members(records)
    except ValidationError as exc:
        logger.error("Import rejected: {}", exc.message)
        for position, problem in exc.field_errors.items():
            print(f"  ⚠️  #{position}: {problem}")
        return False

    logger.info("Imported {} members from {}", count, path)
    return True


def run_validation(kv: KeyValueRepository) -> bool:
    """Check the stored snapshot without loading it into the store."""
    raw = kv.get_raw(STORE_KEY)
    if raw is None:
        print("\n⚠️  No snapshot stored yet.\n")
        return True

    try:
        data = decode_snapshot(raw)
    except SnapshotError as exc:
        print(f"\n❌ {exc.message}\n")
        return False

    problems = []
    seen_ids: set[str] = set()
    for i, record in enumerate(data):
        if not isinstance(record, dict):
            problems.append(f"#{i}: not an object")
            continue
        member_id = record.get("id")
        if isinstance(member_id, str) and member_id:
            if member_id in seen_ids:
                problems.append(f"#{i} id: repeated")
            seen_ids.add(member_id)
        result = validate(record)
        for name, message in result.field_errors.items():
            problems.append(f"#{i} {name}: {message}")

    print(f"\nSnapshot '{STORE_KEY}': {len(data)} records")
    for problem in problems:
        print(f"  ⚠️  {problem}")
    print("✅ Snapshot valid!" if not problems else "❌ Some records are invalid.")
    print()
    return not problems


def run_validation_readonly() -> bool:
    """Validate the database file without creating or modifying it."""
    if not db_exists():
        print(f"\n⚠️  No database at {DB_PATH}. Nothing to validate.\n")
        return True

    conn = duckdb.connect(DB_PATH, read_only=True)
    try:
        return run_validation(KeyValueRepository(conn, read_only=True))
    finally:
        conn.close()


def main():
    args = sys.argv[1:]
    if not args:
        print(__doc__)
        sys.exit(1)

    setup_logging(level="INFO", to_file=True, component="cli")
    command, rest = args[0], args[1:]

    if command == "validate":
        sys.exit(0 if run_validation_readonly() else 1)

    try:
        container.init()

        if command == "list":
            run_list()
        elif command in ("export", "export-csv", "import") and rest:
            path = Path(rest[0])
            if command == "export":
                run_export(path)
            elif command == "export-csv":
                run_export_csv(path)
            elif not run_import(path):
                sys.exit(1)
        else:
            print(__doc__)
            sys.exit(1)
    finally:
        close_db()


if __name__ == "__main__":
    main()
