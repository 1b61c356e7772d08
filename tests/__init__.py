"""Test package. Points the app at a throwaway SQLite database before anything imports settings."""

import os
import tempfile

_TEST_DB_DIR = tempfile.mkdtemp(prefix="fzscripts-tests-")

os.environ["APP_ENV"] = "test"
os.environ["DATABASE_URL"] = f"sqlite:///{os.path.join(_TEST_DB_DIR, 'test.db')}"
os.environ["SESSION_SECRET"] = "test-session-secret"
os.environ["SEED_SAMPLE_SCRIPT"] = "true"
os.environ["LOG_LEVEL"] = "WARNING"
