"""Key-value slot table - whole-document snapshots stored under a fixed key."""

KV_DDL = """
CREATE TABLE IF NOT EXISTS kv_store (
    key VARCHAR PRIMARY KEY,
    data VARCHAR NOT NULL,
    updated_at TIMESTAMP NOT NULL
)
"""
