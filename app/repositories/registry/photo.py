"""Photo repository - content-addressed storage for member photos."""

import hashlib
from datetime import datetime

from loguru import logger

from app.repositories.base import BaseRepository


def photo_digest(content: bytes) -> str:
    return hashlib.sha256(content).hexdigest()


class PhotoRepository(BaseRepository):
    """Stores uploaded photo bytes keyed by their sha256 digest."""

    def save(self, content: bytes, mime: str | None = None) -> str:
        """Store bytes and return their digest. Identical bytes are stored once."""
        self._check_writable()
        digest = photo_digest(content)
        if self.exists(digest):
            logger.debug("Photo already stored: {}", digest[:12])
            return digest

        self.execute(
            "INSERT INTO photo (digest, mime, content, created_at) VALUES (?, ?, ?, ?)",
            [digest, mime, content, datetime.now()],
        )
        logger.info("Photo stored: {} ({} bytes)", digest[:12], len(content))
        return digest

    def get(self, digest: str) -> tuple[bytes, str | None] | None:
        """Load (content, mime) for a digest."""
        row = self.fetchone("SELECT content, mime FROM photo WHERE digest = ?", [digest])
        if row is None:
            return None
        return bytes(row[0]), row[1]

    def exists(self, digest: str) -> bool:
        row = self.fetchone("SELECT COUNT(*) FROM photo WHERE digest = ?", [digest])
        return row[0] > 0
