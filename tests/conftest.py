"""
Shared test fixtures for trello-cli tests.
Isolates config so tests never read real credentials or hit the network.
"""

import os
import sys
import pytest

# Add project root to path so imports work
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))


@pytest.fixture(autouse=True)
def _isolate_config(monkeypatch, tmp_path):
    """Ensure every test starts with a clean config state.
    Credentials come only from what a test sets up explicitly."""
    from trello_cli import config

    monkeypatch.delenv("TRELLO_API_KEY", raising=False)
    monkeypatch.delenv("TRELLO_API_TOKEN", raising=False)
    monkeypatch.setattr(config, "HTTP_LOG_ENABLED", False)
    monkeypatch.setattr(config, "HTTP_TIMEOUT_SECONDS", 30)
    monkeypatch.setattr(config, "HTTP_MAX_RESPONSE_BYTES", 5_000_000)
    monkeypatch.setattr(
        config, "config_path", lambda: str(tmp_path / "trello" / "config.json")
    )
