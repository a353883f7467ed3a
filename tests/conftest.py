"""
Pytest configuration and shared fixtures.
"""

import pytest
import sys
import os

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from fastapi.testclient import TestClient

from app.main import app
from app.reference.tables import default_reference_data, set_reference_data


def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line("markers", "integration: marks integration tests")


@pytest.fixture(autouse=True)
def reset_reference_data():
    """Start every test from the built-in reference tables."""
    set_reference_data(default_reference_data())
    yield
    set_reference_data(default_reference_data())


@pytest.fixture
def client():
    """Create test client."""
    return TestClient(app)
