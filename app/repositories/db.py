"""DuckDB connection management."""

import threading
from pathlib import Path

import duckdb
from loguru import logger

from app.models import ALL_DDL
from settings import DB_PATH

_local = threading.local()


def db_exists() -> bool:
    """Check if database file exists."""
    return Path(DB_PATH).exists()


def init_tables(conn: duckdb.DuckDBPyConnection) -> None:
    """Initialize all tables from DDL statements (idempotent - uses IF NOT EXISTS)."""
    for ddl in ALL_DDL:
        conn.execute(ddl)
    logger.debug("DB tables initialized")


def _ensure_db_exists() -> None:
    """Create DB with tables if it doesn't exist."""
    if not db_exists():
        logger.warning("DB not found: {}. Creating empty DB.", DB_PATH)
        conn = duckdb.connect(DB_PATH)
        init_tables(conn)
        conn.close()


def get_db(read_only: bool = False) -> duckdb.DuckDBPyConnection:
    """Get thread-local connection."""
    if not hasattr(_local, "conn") or _local.conn is None:
        _ensure_db_exists()
        _local.conn = duckdb.connect(DB_PATH, read_only=read_only)
        if not read_only:
            init_tables(_local.conn)
        logger.debug("DB connected: {} (read_only={})", DB_PATH, read_only)
    return _local.conn


def close_db() -> None:
    """Close thread-local connection."""
    if hasattr(_local, "conn") and _local.conn:
        _local.conn.close()
        _local.conn = None
        logger.debug("DB connection closed")
