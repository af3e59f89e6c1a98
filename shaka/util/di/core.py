"""Core DI providers (non-mockable)."""

from dishka import Scope, from_context, provide

from shaka.config import Settings
from shaka.domain.service import IdentityProvider
from shaka.util.di.base import ProviderBase


class ProdConfigProvider(ProviderBase):
    """Production config provider - concrete, no mocks needed.

    Settings are loaded from environment variables and .env file automatically.
    The acting user's identity is passed in as request context:

        async with container(context={IdentityProvider: identity}) as request:
            controller = await request.get(CommentThreadController)
    """

    identity_provider = from_context(provides=IdentityProvider, scope=Scope.REQUEST)

    @provide(scope=Scope.APP)
    def provide_settings(self) -> Settings:
        """Provide application settings from environment."""
        return Settings()
