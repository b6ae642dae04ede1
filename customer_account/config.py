"""Application configuration."""

from typing import Literal

from pydantic import BaseModel, ConfigDict
from pydantic_settings import BaseSettings, SettingsConfigDict

from customer_account.util.error import ConfigurationError

DEFAULT_SESSION_SECRET = "default-secret-change-in-production"
PLACEHOLDER_CLIENT_ID = "CHANGE_ME_IN_PRODUCTION"


class ShopSettings(BaseModel):
    """Storefront whose customer accounts we authenticate against."""

    model_config = ConfigDict(frozen=True)

    # Storefront domain hosting the discovery documents (no scheme)
    storefront_domain: str = "shop.example.com"

    # Public client id registered for the Customer Account API
    api_client_id: str = PLACEHOLDER_CLIENT_ID


class SessionSettings(BaseModel):
    """Customer session cookie configuration."""

    model_config = ConfigDict(frozen=True)

    secret: str = DEFAULT_SESSION_SECRET  # Must be overridden in production
    algorithm: str = "HS256"
    cookie_name: str = "__customer_session"
    max_age_seconds: int = 3600


class AuthSettings(BaseModel):
    """Access token lifecycle configuration."""

    model_config = ConfigDict(frozen=True)

    # Lifetime applied when the token endpoint omits expires_in.
    # None keeps such tokens valid until revoked upstream.
    default_token_lifetime_seconds: int | None = None


class HTTPSettings(BaseModel):
    """Outbound HTTP configuration."""

    model_config = ConfigDict(frozen=True)

    timeout_seconds: float = 10.0


class DatabaseSettings(BaseModel):
    """Database configuration."""

    model_config = ConfigDict(frozen=True)

    url: str = (
        "postgresql+asyncpg://customer_account:customer_account"
        "@localhost:5432/customer_account"
    )
    pool_size: int = 5
    max_overflow: int = 10


class ObservabilitySettings(BaseModel):
    """Observability configuration for Logfire."""

    model_config = ConfigDict(frozen=True)

    # Logfire API token (optional - if not set, logs only go to console)
    logfire_token: str | None = None

    # If None, sends only when a token is present
    send_to_logfire: bool | None = None


class Settings(BaseSettings):
    """Application settings.

    Loaded from the environment and an optional .env file. Nested groups use
    a double underscore, for example:

        SHOP__STOREFRONT_DOMAIN=my-store.myshopify.com
        SHOP__API_CLIENT_ID=shp_0f9e...
        SESSION__SECRET=...
        ENVIRONMENT=production
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
    )

    environment: Literal["test", "development", "staging", "production"] = "development"
    debug: bool = False

    shop: ShopSettings = ShopSettings()
    session: SessionSettings = SessionSettings()
    auth: AuthSettings = AuthSettings()
    http: HTTPSettings = HTTPSettings()
    database: DatabaseSettings = DatabaseSettings()
    observability: ObservabilitySettings = ObservabilitySettings()

    @property
    def is_production(self) -> bool:
        """Whether cookies must be marked secure."""
        return self.environment == "production"


def validate_settings(settings: Settings) -> Settings:
    """Reject settings that are unsafe for the configured environment.

    Args:
        settings: Loaded application settings

    Returns:
        The same settings, unchanged

    Raises:
        ConfigurationError: If production runs with placeholder secrets
    """
    if not settings.shop.storefront_domain:
        raise ConfigurationError("SHOP__STOREFRONT_DOMAIN must be configured")

    if settings.is_production:
        if settings.session.secret == DEFAULT_SESSION_SECRET:
            raise ConfigurationError("SESSION__SECRET must be set in production")
        if settings.shop.api_client_id == PLACEHOLDER_CLIENT_ID:
            raise ConfigurationError("SHOP__API_CLIENT_ID must be set in production")

    return settings
