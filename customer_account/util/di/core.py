"""Core DI providers (non-mockable)."""

from dishka import Scope, provide

from customer_account.config import (
    AuthSettings,
    HTTPSettings,
    SessionSettings,
    Settings,
    ShopSettings,
    validate_settings,
)
from customer_account.util.di.base import ProviderBase
from customer_account.util.session import CustomerSessionStorage


class ProdConfigProvider(ProviderBase):
    """Production config provider - concrete, no mocks needed.

    Each settings group is provided separately so components receive only
    the immutable configuration they use.
    """

    scope = Scope.APP

    @provide
    def provide_settings(self) -> Settings:
        """Provide validated application settings from environment."""
        return validate_settings(Settings())

    @provide
    def provide_shop_settings(self, settings: Settings) -> ShopSettings:
        return settings.shop

    @provide
    def provide_session_settings(self, settings: Settings) -> SessionSettings:
        return settings.session

    @provide
    def provide_auth_settings(self, settings: Settings) -> AuthSettings:
        return settings.auth

    @provide
    def provide_http_settings(self, settings: Settings) -> HTTPSettings:
        return settings.http

    @provide
    def provide_session_storage(
        self, settings: Settings, session_settings: SessionSettings
    ) -> CustomerSessionStorage:
        """Provide customer session cookie storage.

        Cookies are marked secure only in production.
        """
        return CustomerSessionStorage(
            settings=session_settings, secure=settings.is_production
        )
