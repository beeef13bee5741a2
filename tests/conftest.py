"""
Shared test fixtures and configuration.

This module provides pytest fixtures for:
- A fresh in-memory registry per test
- Token issuer with a test key
- Domain services wired to both
- Valid request field values
"""

from datetime import datetime, timezone

import pytest

from src.adapters.repository.memory import InMemoryIdentityRegistry
from src.adapters.token.jose_issuer import JoseTokenIssuer
from src.domain.authentication import AuthenticationService
from src.domain.registration import RegistrationService

TEST_SECRET_KEY = "test_jwt_secret_key_for_testing_only"
FIXED_NOW = datetime(2030, 1, 15, 12, 0, 0, tzinfo=timezone.utc)

VALID_EMAIL = "a@b.com"
VALID_PHONE = "5551234567"
VALID_PASSWORD = "Pass123@"


@pytest.fixture
def registry() -> InMemoryIdentityRegistry:
    """Empty registry for each test."""
    return InMemoryIdentityRegistry()


@pytest.fixture
def token_issuer() -> JoseTokenIssuer:
    """HS256 issuer with the test key and the default 24h TTL."""
    return JoseTokenIssuer(secret_key=TEST_SECRET_KEY)


@pytest.fixture
def registration_service(registry: InMemoryIdentityRegistry) -> RegistrationService:
    """Registration service bound to the test registry."""
    return RegistrationService(registry=registry)


@pytest.fixture
def authentication_service(
    registry: InMemoryIdentityRegistry, token_issuer: JoseTokenIssuer
) -> AuthenticationService:
    """Authentication service with a frozen clock."""
    return AuthenticationService(
        registry=registry,
        token_issuer=token_issuer,
        clock=lambda: FIXED_NOW,
    )
