"""
Port interfaces - Protocol definitions for infrastructure abstraction.

This module defines the value types shared across the domain and the
interfaces (ports) the domain requires from infrastructure.
Adapters implement these protocols.
"""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Protocol


class Field(str, Enum):
    """
    Request fields subject to presence and format checks.

    Values are the public field names, used verbatim in error messages.
    """

    EMAIL = "correo"
    PHONE = "telefono"
    PASSWORD = "contraseña"


class ClaimResult(Enum):
    """
    Result of an atomic check-and-insert on the registry.

    Email collisions are detected before phone collisions.
    """

    CLAIMED = "claimed"
    EMAIL_TAKEN = "email_taken"
    PHONE_TAKEN = "phone_taken"


@dataclass(frozen=True)
class Identity:
    """A registered user. Immutable once created."""

    email: str
    phone: str
    secret: str

    def __repr__(self) -> str:
        return f"Identity(email={self.email!r}, phone={self.phone!r})"


@dataclass(frozen=True)
class IssuedToken:
    """Signed token plus the instant it was issued."""

    token: str
    issued_at: datetime


class IdentityRegistry(Protocol):
    """Port interface for identity storage."""

    def find_by_email(self, email: str) -> Identity | None:
        """Return the first identity whose email matches exactly, or None."""
        ...

    def find_by_phone(self, phone: str) -> Identity | None:
        """Return the first identity whose phone matches exactly, or None."""
        ...

    def find_by_credentials(self, email: str, secret: str) -> Identity | None:
        """Return the first identity matching both email and secret, or None."""
        ...

    def insert(self, identity: Identity) -> None:
        """Append an identity unconditionally."""
        ...

    def claim(self, identity: Identity) -> ClaimResult:
        """
        Atomically check for duplicates and insert.

        Lookup by email, lookup by phone and insertion run as one
        critical section, so concurrent claims for the same email or
        phone admit exactly one identity.

        Args:
            identity: Candidate identity, already validated

        Returns:
            CLAIMED if inserted, EMAIL_TAKEN or PHONE_TAKEN otherwise
        """
        ...


class TokenIssuer(Protocol):
    """Port interface for signed token construction."""

    def issue(self, subject: str, issued_at: datetime) -> str:
        """
        Sign a time-limited token for the subject.

        Args:
            subject: Authenticated email
            issued_at: Issuance instant; expiry is computed from it

        Returns:
            Opaque signed token string

        Raises:
            TokenIssuanceError: If signing fails
        """
        ...
