"""Photo model - uploaded member photos, addressed by content digest."""

PHOTO_DDL = """
CREATE TABLE IF NOT EXISTS photo (
    digest VARCHAR PRIMARY KEY,
    mime VARCHAR,
    content BLOB NOT NULL,
    created_at TIMESTAMP NOT NULL
)
"""
