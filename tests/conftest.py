"""Pytest configuration and fixtures."""

import sys
from pathlib import Path

import pytest

# Add project root to sys.path for imports
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))


@pytest.fixture(autouse=True)
def _no_real_api_key(monkeypatch):
    """A developer's .env must never make a test hit the real API."""
    monkeypatch.setenv("GROQ_API_KEY", "")
