"""Key-value repository - whole-document JSON snapshots."""

import json
from datetime import datetime

from loguru import logger

from app.repositories.base import BaseRepository


class KeyValueRepository(BaseRepository):
    """Repository for key-value slot operations."""

    def get_raw(self, key: str) -> str | None:
        """Load the stored text under key, unparsed."""
        row = self.fetchone("SELECT data FROM kv_store WHERE key = ?", [key])
        if row:
            logger.debug("KV hit: key={}", key)
            return row[0]
        return None

    def set(self, key: str, data) -> None:
        """Overwrite the document under key."""
        self.set_raw(key, json.dumps(data, ensure_ascii=False))

    def set_raw(self, key: str, raw: str) -> None:
        self._check_writable()
        self.execute(
            """
            INSERT OR REPLACE INTO kv_store (key, data, updated_at)
            VALUES (?, ?, ?)
            """,
            [key, raw, datetime.now()],
        )
        logger.debug("KV saved: key={} ({} chars)", key, len(raw))
