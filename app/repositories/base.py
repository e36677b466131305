"""Base repository class."""

import threading
from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any

import duckdb
from loguru import logger

from app.repositories.db import get_db


class BaseRepository:
    """Base repository with common functionality.

    Uses the thread-local connection unless one is passed in explicitly
    (tests and the CLI hand in their own). Statements run on a cursor owned
    by the calling thread, so transactions from different Streamlit
    sessions never share a connection.
    """

    def __init__(self, conn: duckdb.DuckDBPyConnection | None = None, read_only: bool = False):
        self._db = conn if conn is not None else get_db(read_only)
        self._read_only = read_only
        self._local = threading.local()
        logger.debug("{} initialized", self.__class__.__name__)

    def _cursor(self) -> duckdb.DuckDBPyConnection:
        cursor = getattr(self._local, "cursor", None)
        if cursor is None:
            cursor = self._db.cursor()
            self._local.cursor = cursor
            logger.debug("{}: cursor opened for {}", self.__class__.__name__, threading.current_thread().name)
        return cursor

    def _check_writable(self) -> None:
        if self._read_only:
            raise RuntimeError(f"{self.__class__.__name__} is read-only")

    @contextmanager
    def transaction(self) -> Iterator[None]:
        """Run the enclosed statements as one all-or-nothing write."""
        cursor = self._cursor()
        cursor.execute("BEGIN TRANSACTION")
        try:
            yield
        except Exception:
            cursor.execute("ROLLBACK")
            logger.warning("{} transaction rolled back", self.__class__.__name__)
            raise
        cursor.execute("COMMIT")

    def execute(self, query: str, params: list | None = None) -> Any:
        """Execute SQL query."""
        if params:
            return self._cursor().execute(query, params)
        return self._cursor().execute(query)

    def fetchall(self, query: str, params: list | None = None) -> list:
        """Execute and fetch all rows."""
        return self.execute(query, params).fetchall()

    def fetchone(self, query: str, params: list | None = None) -> Any:
        """Execute and fetch one row."""
        return self.execute(query, params).fetchone()
