"""
Shared fixtures for adversarial tests.

Provides common test infrastructure for race condition and enumeration tests.
"""

from collections.abc import Generator

import pytest
from fastapi.testclient import TestClient

from src.api.main import app

# Module-level marker for all adversarial tests
pytestmark = pytest.mark.adversarial


@pytest.fixture
def client() -> Generator[TestClient, None, None]:
    """Test client over the real app with a fresh registry."""
    with TestClient(app) as test_client:
        yield test_client
