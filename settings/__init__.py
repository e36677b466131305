"""Application settings."""

import os
from pathlib import Path

# Database
DB_PATH = os.getenv("REGISTRY_DB_PATH", "registry.duckdb")

# Key-value slot holding the member snapshot
STORE_KEY = "members"
CORRUPT_SUFFIX = ".corrupt"

# Logging
LOG_DIR = Path(os.getenv("REGISTRY_LOG_DIR", "logs"))
LOG_LEVEL = os.getenv("REGISTRY_LOG_LEVEL", "INFO")
