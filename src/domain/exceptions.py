"""
Domain exceptions - Semantic error types for registration and login.

This module defines domain-specific exceptions that communicate
business rule violations without leaking transport details.
The API layer maps each family to a status class.
"""

from .ports import Field


class CredentialServiceError(Exception):
    """Base class for credential service domain errors."""

    pass


class ClientInputError(CredentialServiceError):
    """Request content rejected before touching the registry."""

    def __init__(self, field: Field) -> None:
        super().__init__(field.value)
        self.field = field


class MissingField(ClientInputError):
    """A required field is empty or absent."""

    pass


class InvalidFormat(ClientInputError):
    """A field failed its format validator."""

    pass


class ConflictError(CredentialServiceError):
    """Identity collides with an existing registration."""

    pass


class DuplicateEmail(ConflictError):
    """Email is already registered."""

    pass


class DuplicatePhone(ConflictError):
    """Phone is already registered."""

    pass


class AuthenticationError(CredentialServiceError):
    """Credentials could not be verified."""

    pass


class InvalidCredentials(AuthenticationError):
    """Unknown email or wrong password (deliberately indistinguishable)."""

    pass


class ServerFault(CredentialServiceError):
    """Server-side failure, never caused by the request content."""

    pass


class TokenIssuanceError(ServerFault):
    """Token could not be signed (key or algorithm misconfiguration)."""

    pass
