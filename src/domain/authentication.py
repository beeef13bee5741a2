"""
Authentication domain service - Credential verification and token issuance.

Login is fail-fast:

1. Presence: email -> password (MissingField)
2. Lookup by exact email + password match (InvalidCredentials)
3. Token signing (TokenIssuanceError on failure)

Unknown email and wrong password produce the same InvalidCredentials,
so callers cannot learn which part was wrong.
"""

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import datetime, timezone

from .exceptions import InvalidCredentials, MissingField
from .ports import Field, IdentityRegistry, IssuedToken, TokenIssuer

logger = logging.getLogger(__name__)


def utc_now() -> datetime:
    """Current time, timezone-aware UTC."""
    return datetime.now(timezone.utc)


@dataclass
class AuthenticationService:
    """
    Domain service for login.

    The signing key and algorithm live in the injected token issuer;
    the clock is injectable so expiry can be tested deterministically.
    """

    registry: IdentityRegistry
    token_issuer: TokenIssuer
    clock: Callable[[], datetime] = field(default=utc_now)

    def login(self, email: str, secret: str) -> IssuedToken:
        """
        Verify credentials and issue a signed token.

        Args:
            email: User's email address
            secret: User's password

        Returns:
            IssuedToken with the signed token and its issuance instant

        Raises:
            MissingField: If email or password is empty
            InvalidCredentials: If no identity matches both values
            TokenIssuanceError: If the token cannot be signed
        """
        if email == "":
            logger.info("Missing field %s in login request", Field.EMAIL.value)
            raise MissingField(Field.EMAIL)
        if secret == "":
            logger.info("Missing field %s in login request", Field.PASSWORD.value)
            raise MissingField(Field.PASSWORD)

        identity = self.registry.find_by_credentials(email, secret)
        if identity is None:
            logger.info("Login rejected: no identity matches the supplied credentials")
            raise InvalidCredentials()

        issued_at = self.clock()
        token = self.token_issuer.issue(identity.email, issued_at)
        logger.debug("Token issued for %s", identity.email)
        return IssuedToken(token=token, issued_at=issued_at)
