"""Pytest configuration for tests.

Sets up Python path and fixtures for all tests.
"""

import sys
from pathlib import Path

import pytest

# Add project root to Python path so imports work correctly
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))


@pytest.fixture(autouse=True)
def isolated_github_env(monkeypatch):
    """Keep repository identity variables from a developer .env out of tests."""
    for key in ("GITHUB_OWNER", "GITHUB_REPO", "GITHUB_TOKEN"):
        monkeypatch.delenv(key, raising=False)
