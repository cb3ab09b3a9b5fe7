"""Root conftest — shared test configuration."""

import os

# Ensure tests never reach a real database or run startup migrations
os.environ.setdefault(
    "DATABASE_URL",
    "sqlite+aiosqlite:///test.db",
)
os.environ.setdefault("MIGRATE_ON_STARTUP", "false")
os.environ.setdefault("LOG_FORMAT", "text")
