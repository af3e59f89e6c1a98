"""Firebase adapters."""

from .identity import FirebaseIdentityProvider, StaticIdentityProvider

__all__ = [
    "FirebaseIdentityProvider",
    "StaticIdentityProvider",
]
