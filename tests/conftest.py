"""Root pytest configuration for all tests.

This conftest applies to all test types (unit, integration).
"""

import logging

import pytest

# Keep urllib3 connection chatter out of captured logs.
logging.getLogger("urllib3").setLevel(logging.WARNING)


@pytest.fixture(autouse=True)
def _isolate_access_token(monkeypatch):
    """Never let a developer's real ESA_ACCESS_TOKEN leak into tests."""
    monkeypatch.delenv("ESA_ACCESS_TOKEN", raising=False)
