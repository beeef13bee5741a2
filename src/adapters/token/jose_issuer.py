"""
JWT token issuer adapter - Implements TokenIssuer protocol.

This module signs login tokens with python-jose. Claims:

- correo: authenticated email (token subject)
- exp:    issuance instant + TTL, as epoch seconds

Tokens are not stored server-side; validity is purely signature + expiry.
"""

import logging
from datetime import datetime, timedelta

from jose import jwt
from jose.exceptions import JOSEError

from src.domain.exceptions import TokenIssuanceError

logger = logging.getLogger(__name__)

DEFAULT_ALGORITHM = "HS256"
DEFAULT_TTL = timedelta(hours=24)


class JoseTokenIssuer:
    """
    Implements TokenIssuer protocol via python-jose.

    Uses structural subtyping - no explicit inheritance from Protocol.
    Key, algorithm and TTL are fixed at construction and never change.
    """

    def __init__(
        self,
        secret_key: str,
        algorithm: str = DEFAULT_ALGORITHM,
        ttl: timedelta = DEFAULT_TTL,
    ) -> None:
        self._secret_key = secret_key
        self._algorithm = algorithm
        self._ttl = ttl

    @property
    def algorithm(self) -> str:
        return self._algorithm

    def issue(self, subject: str, issued_at: datetime) -> str:
        """
        Sign a token for subject expiring ttl after issued_at.

        Raises:
            TokenIssuanceError: If python-jose rejects the key or algorithm
        """
        claims = {
            "correo": subject,
            "exp": int((issued_at + self._ttl).timestamp()),
        }
        try:
            return jwt.encode(claims, self._secret_key, algorithm=self._algorithm)
        except JOSEError as e:
            raise TokenIssuanceError(f"Could not sign token with {self._algorithm}") from e
