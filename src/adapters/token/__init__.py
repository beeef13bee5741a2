"""Token adapters - Signed token implementations."""

from .jose_issuer import JoseTokenIssuer

__all__ = ["JoseTokenIssuer"]
