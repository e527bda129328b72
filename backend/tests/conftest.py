"""Root conftest — shared test configuration."""

import os

# Keep tests off any developer .env counter file or database
os.environ.setdefault("COUNTER_BACKEND", "json")
os.environ.setdefault("USAGE_FILE", "test-usage.json")
os.environ.setdefault("LOG_FORMAT", "text")
