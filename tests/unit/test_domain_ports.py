"""
Unit tests for domain ports and exceptions.

Tests verify:
- Value types are properly defined
- Exception hierarchy matches the error taxonomy
- Domain purity (zero framework imports)
"""

import dataclasses
import subprocess
from enum import Enum
from pathlib import Path

import pytest

from src.domain.exceptions import (
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
from src.domain.ports import ClaimResult, Field, Identity

DOMAIN_DIR = Path(__file__).resolve().parents[2] / "src" / "domain"
DOMAIN_IMPORT_PATTERN = r"^(from|import) (fastapi|pydantic|jose|src\.adapters|src\.api)"


class TestFieldEnum:
    """Tests for Field enum."""

    def test_field_is_str_enum(self) -> None:
        """Field uses str mixin so values read as wire names."""
        assert issubclass(Field, Enum)
        assert issubclass(Field, str)

    def test_field_values(self) -> None:
        """Field values are the public field names."""
        assert Field.EMAIL.value == "correo"
        assert Field.PHONE.value == "telefono"
        assert Field.PASSWORD.value == "contraseña"


class TestClaimResultEnum:
    """Tests for ClaimResult enum."""

    def test_claim_result_members(self) -> None:
        """ClaimResult has exactly the three outcomes."""
        assert {r.name for r in ClaimResult} == {"CLAIMED", "EMAIL_TAKEN", "PHONE_TAKEN"}


class TestIdentity:
    """Tests for the Identity value type."""

    def test_identity_is_immutable(self) -> None:
        """Identities cannot be modified after creation."""
        identity = Identity(email="a@b.com", phone="5551234567", secret="Pass123@")

        with pytest.raises(dataclasses.FrozenInstanceError):
            identity.email = "c@d.com"  # type: ignore[misc]

    def test_repr_hides_secret(self) -> None:
        """repr never shows the secret."""
        identity = Identity(email="a@b.com", phone="5551234567", secret="Pass123@")

        assert "Pass123@" not in repr(identity)
        assert "a@b.com" in repr(identity)


class TestExceptionHierarchy:
    """Tests for the error taxonomy."""

    @pytest.mark.parametrize(
        "exc_type,family",
        [
            (MissingField, ClientInputError),
            (InvalidFormat, ClientInputError),
            (DuplicateEmail, ConflictError),
            (DuplicatePhone, ConflictError),
            (InvalidCredentials, AuthenticationError),
            (TokenIssuanceError, ServerFault),
        ],
    )
    def test_exception_family(self, exc_type: type, family: type) -> None:
        """Each concrete error belongs to its family and the common base."""
        assert issubclass(exc_type, family)
        assert issubclass(exc_type, CredentialServiceError)

    def test_client_input_error_carries_field(self) -> None:
        """MissingField and InvalidFormat expose the offending field."""
        exc = MissingField(Field.PHONE)

        assert exc.field is Field.PHONE
        assert str(exc) == "telefono"


class TestDomainPurity:
    """The domain package imports no framework or adapter code."""

    def test_no_framework_imports(self) -> None:
        """grep finds no fastapi, pydantic, jose or adapter imports in src/domain."""
        result = subprocess.run(
            ["grep", "-rE", "--include=*.py", DOMAIN_IMPORT_PATTERN, str(DOMAIN_DIR)],
            capture_output=True,
            text=True,
        )
        assert result.stdout == "", f"Framework imports found:\n{result.stdout}"
