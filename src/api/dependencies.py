"""
FastAPI dependencies - Dependency injection factories.

This module provides Depends() factories for injecting
domain services and infrastructure adapters into routes.
"""

from fastapi import Request

from src.adapters.repository.memory import InMemoryIdentityRegistry
from src.adapters.token.jose_issuer import JoseTokenIssuer
from src.domain.authentication import AuthenticationService
from src.domain.registration import RegistrationService


def get_registry(request: Request) -> InMemoryIdentityRegistry:
    """
    Get the process-wide identity registry from app state.

    The registry is created during app lifespan startup and stored in app.state.
    """
    return request.app.state.registry


def get_token_issuer(request: Request) -> JoseTokenIssuer:
    """Get the token issuer configured at startup."""
    return request.app.state.token_issuer


def get_registration_service(request: Request) -> RegistrationService:
    """Create registration service bound to the shared registry."""
    return RegistrationService(registry=get_registry(request))


def get_authentication_service(request: Request) -> AuthenticationService:
    """
    Create authentication service with injected dependencies.

    Wires together the registry and token issuer for the domain service.
    """
    return AuthenticationService(
        registry=get_registry(request),
        token_issuer=get_token_issuer(request),
    )
