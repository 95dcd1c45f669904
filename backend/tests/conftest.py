"""Root conftest — shared test configuration."""

import os

# Importing tracker.main builds an app from settings; keep it off the real store
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("LOG_FORMAT", "text")
