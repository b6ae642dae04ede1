"""Unit tests for settings validation."""

import pytest

from customer_account.config import (
    SessionSettings,
    Settings,
    ShopSettings,
    validate_settings,
)
from customer_account.util.error import ConfigurationError


class TestValidateSettings:
    """Tests for validate_settings function."""

    def test_development_defaults_are_accepted(self):
        """Placeholder secrets are fine outside production."""
        settings = Settings(environment="development")

        assert validate_settings(settings) is settings

    def test_production_rejects_default_session_secret(self):
        """Production must not sign sessions with the default secret."""
        settings = Settings(
            environment="production",
            shop=ShopSettings(api_client_id="client-123"),
        )

        with pytest.raises(ConfigurationError, match="SESSION__SECRET"):
            validate_settings(settings)

    def test_production_rejects_placeholder_client_id(self):
        """Production must have a real client id."""
        settings = Settings(
            environment="production",
            session=SessionSettings(secret="s3cret"),
        )

        with pytest.raises(ConfigurationError, match="SHOP__API_CLIENT_ID"):
            validate_settings(settings)

    def test_empty_storefront_domain_is_rejected(self):
        """Discovery needs a storefront domain."""
        settings = Settings(shop=ShopSettings(storefront_domain=""))

        with pytest.raises(ConfigurationError, match="SHOP__STOREFRONT_DOMAIN"):
            validate_settings(settings)

    def test_production_with_real_values_is_accepted(self):
        """Fully configured production settings pass."""
        settings = Settings(
            environment="production",
            shop=ShopSettings(
                storefront_domain="store.example.com", api_client_id="client-123"
            ),
            session=SessionSettings(secret="s3cret"),
        )

        assert validate_settings(settings).is_production
