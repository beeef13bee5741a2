"""
In-memory registry adapter - Implements IdentityRegistry protocol.

Identities live in an append-only list for the lifetime of the process.

Concurrency Design:
-------------------
FastAPI runs sync route handlers on a threadpool, so registrations and
logins reach this object from many threads at once. A single lock guards
the list. Every public method takes it, and claim() holds it across
the email lookup, the phone lookup and the append, so two threads
registering the same email or phone cannot both observe "no duplicate".

The list itself is never handed out; callers only see single identities.
"""

import logging
import secrets
import threading
from collections.abc import Callable

from src.domain.ports import ClaimResult, Identity

logger = logging.getLogger(__name__)


def _utf8(value: str) -> bytes:
    # Lone surrogates are valid JSON string content
    return value.encode("utf-8", "surrogatepass")


def _same(a: str, b: str) -> bool:
    return secrets.compare_digest(_utf8(a), _utf8(b))


class InMemoryIdentityRegistry:
    """
    Implements IdentityRegistry protocol with a lock-guarded list.

    Uses structural subtyping - no explicit inheritance from Protocol.
    Insertion order is preserved; lookups return the first match.
    """

    def __init__(self) -> None:
        self._identities: list[Identity] = []
        self._lock = threading.Lock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._identities)

    def find_by_email(self, email: str) -> Identity | None:
        with self._lock:
            return self._first(lambda i: i.email == email)

    def find_by_phone(self, phone: str) -> Identity | None:
        with self._lock:
            return self._first(lambda i: i.phone == phone)

    def find_by_credentials(self, email: str, secret: str) -> Identity | None:
        """
        Find the identity matching both email and secret exactly.

        The secret is compared with secrets.compare_digest.
        """
        with self._lock:
            return self._first(lambda i: i.email == email and _same(i.secret, secret))

    def insert(self, identity: Identity) -> None:
        """Append unconditionally. Duplicate prevention belongs to claim()."""
        with self._lock:
            self._identities.append(identity)

    def claim(self, identity: Identity) -> ClaimResult:
        """
        Atomically check email, then phone, then insert.

        Args:
            identity: Validated candidate identity

        Returns:
            ClaimResult.CLAIMED if inserted, EMAIL_TAKEN or PHONE_TAKEN otherwise
        """
        with self._lock:
            if self._first(lambda i: i.email == identity.email) is not None:
                return ClaimResult.EMAIL_TAKEN
            if self._first(lambda i: i.phone == identity.phone) is not None:
                return ClaimResult.PHONE_TAKEN
            self._identities.append(identity)
            count = len(self._identities)

        logger.debug("Registry holds %d identities", count)
        return ClaimResult.CLAIMED

    def _first(self, predicate: Callable[[Identity], bool]) -> Identity | None:
        # Caller must hold self._lock
        for identity in self._identities:
            if predicate(identity):
                return identity
        return None
