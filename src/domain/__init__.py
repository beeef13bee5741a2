"""
Domain layer - Pure business logic with zero framework imports.

This package contains the validators, the registration and
authentication flows, and the port interfaces they depend on.
Infrastructure (storage, token signing) is reached only through ports.
"""

from .authentication import AuthenticationService
from .exceptions import (
    AuthenticationError,
    ClientInputError,
    ConflictError,
    CredentialServiceError,
    DuplicateEmail,
    DuplicatePhone,
    InvalidCredentials,
    InvalidFormat,
    MissingField,
    ServerFault,
    TokenIssuanceError,
)
from .ports import ClaimResult, Field, Identity, IdentityRegistry, IssuedToken, TokenIssuer
from .registration import RegistrationService
from .validation import is_valid_email, is_valid_password, is_valid_phone

__all__ = [
    "AuthenticationError",
    "AuthenticationService",
    "ClaimResult",
    "ClientInputError",
    "ConflictError",
    "CredentialServiceError",
    "DuplicateEmail",
    "DuplicatePhone",
    "Field",
    "Identity",
    "IdentityRegistry",
    "InvalidCredentials",
    "InvalidFormat",
    "IssuedToken",
    "MissingField",
    "RegistrationService",
    "ServerFault",
    "TokenIssuanceError",
    "TokenIssuer",
    "is_valid_email",
    "is_valid_password",
    "is_valid_phone",
]
