"""Pytest fixtures for testing"""

import pytest
from fastapi.testclient import TestClient
from cardcycle_gateway.api.main import create_app

# Most card tests use a closing day of 10 and a due day of 15
CLOSING_DAY = 10
DUE_DAY = 15


@pytest.fixture
def client() -> TestClient:
    """Create FastAPI test client"""
    return TestClient(create_app())


@pytest.fixture
def card_policy() -> dict:
    """Typical card billing policy"""
    return {"closing_day": CLOSING_DAY, "due_day": DUE_DAY}
