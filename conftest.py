"""Pytest configuration: ensures the project root is importable."""

import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent))


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch):
    """Keep a developer's .env / shell settings out of the test results."""
    for name in ("NUMSPELL_DEFAULT_LANGUAGE", "NUMSPELL_BATCH_LIMIT"):
        monkeypatch.delenv(name, raising=False)
    yield
