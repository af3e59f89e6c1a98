"""Identity providers backed by Firebase Authentication.

Firebase ID tokens carry the user's uid and, for most sign-in methods, a
``name`` claim. Verification happens once, up front; the provider then
answers from the verified claims.
"""

import asyncio
from typing import Any

import firebase_admin
import logfire
from firebase_admin import auth

from shaka.adapter.error import ProviderError
from shaka.domain.model.comment import default_display_name
from shaka.domain.service.identity_service import IdentityProvider
from shaka.domain.value import UserId


class FirebaseIdentityProvider(IdentityProvider):
    """Identity taken from a verified Firebase ID token."""

    def __init__(self, claims: dict[str, Any]) -> None:
        """Initialize from decoded token claims.

        Args:
            claims: Claims returned by ``auth.verify_id_token``
        """
        uid = claims.get("uid") or claims.get("sub")
        if not uid:
            raise ProviderError("ID token has no uid")
        self._user_id = UserId(uid)
        self._display_name = (
            claims.get("name")
            or (claims.get("email") or "").split("@")[0]
            or default_display_name(uid)
        )

    @classmethod
    async def from_id_token(
        cls, id_token: str, app: firebase_admin.App | None = None
    ) -> "FirebaseIdentityProvider":
        """Verify an ID token and build a provider from its claims.

        Args:
            id_token: Firebase ID token sent by the client
            app: Firebase app (default app when None)

        Returns:
            Identity provider for the token's user

        Raises:
            ProviderError: If the token is invalid, expired or revoked
        """
        try:
            claims = await asyncio.to_thread(auth.verify_id_token, id_token, app)
        except (ValueError, auth.InvalidIdTokenError, auth.CertificateFetchError) as e:
            logfire.warn("ID token verification failed", error=str(e))
            raise ProviderError(f"Invalid ID token: {e}") from e
        return cls(claims)

    def current_user_id(self) -> UserId | None:
        return self._user_id

    def display_name(self) -> str:
        return self._display_name


class StaticIdentityProvider(IdentityProvider):
    """Fixed identity, for scripts, tests and signed-out viewers."""

    def __init__(self, user_id: UserId | None = None, display_name: str = "Guest") -> None:
        self._user_id = user_id
        self._display_name = display_name

    def current_user_id(self) -> UserId | None:
        return self._user_id

    def display_name(self) -> str:
        return self._display_name
