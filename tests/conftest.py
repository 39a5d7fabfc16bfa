"""Test configuration and fixtures for repobook."""

import pytest


@pytest.fixture(autouse=True)
def github_environment(monkeypatch):
    """Keep the developer's GitHub settings out of the tests."""
    monkeypatch.delenv("GITHUB_TOKEN", raising=False)
    monkeypatch.delenv("GITHUB_API_URL", raising=False)
