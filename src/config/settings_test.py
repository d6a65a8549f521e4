"""Settings for the test run: deterministic defaults, in-memory stores."""

import os

os.environ.setdefault("SECRET_KEY", "test-only-secret-key")
os.environ.setdefault("DATABASE_URL", "sqlite://:memory:")
os.environ.setdefault("REDIS_URL", "")

from config.settings import *  # noqa: E402,F401,F403
