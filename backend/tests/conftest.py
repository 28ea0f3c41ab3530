"""Root conftest — shared test configuration."""

import os

# Module-level app in app.main must never touch a real database
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("LOG_FORMAT", "text")
