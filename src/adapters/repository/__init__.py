"""Repository adapters - Identity storage implementations."""

from .memory import InMemoryIdentityRegistry

__all__ = ["InMemoryIdentityRegistry"]
