"""Shared test setup."""
import os

# Keep test runs from writing JSONL logs into the working directory
os.environ.setdefault("LOG_TO_FILE", "false")
