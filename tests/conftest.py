"""
Pytest configuration for matrix calculator tests.
"""

import pytest
from fastapi.testclient import TestClient

from src import load_settings
from src.main import app
from src.services import calculator


@pytest.fixture(autouse=True)
def clear_sessions():
    """Start every test with an empty session store."""
    calculator.store.sessions.clear()
    yield
    calculator.store.sessions.clear()


@pytest.fixture
def client(monkeypatch):
    """Test client with the cosmetic generation delay switched off."""
    monkeypatch.setattr(load_settings, "generation_delay_seconds", 0.0)
    with TestClient(app) as test_client:
        yield test_client
