"""Identity adapters."""

from .in_memory_identity_resolver import InMemoryIdentityResolver

__all__ = ["InMemoryIdentityResolver"]
