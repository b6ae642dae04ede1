"""Unit tests for CustomerAccessToken."""

from datetime import datetime, timedelta, timezone
from uuid import uuid4

from customer_account.domain.model.access_token import CustomerAccessToken
from customer_account.domain.value import AccessTokenId

NOW = datetime(2025, 1, 1, 12, 0, tzinfo=timezone.utc)


def _token(expires_at: datetime | None) -> CustomerAccessToken:
    return CustomerAccessToken(
        id=AccessTokenId(uuid4()),
        shop="shop.example.com",
        access_token="tok1",
        expires_at=expires_at,
        created_at=NOW,
        updated_at=NOW,
    )


class TestIsExpired:
    """Tests for CustomerAccessToken.is_expired."""

    def test_future_expiry_is_valid(self):
        assert not _token(NOW + timedelta(hours=1)).is_expired(NOW)

    def test_past_expiry_is_expired(self):
        assert _token(NOW - timedelta(seconds=1)).is_expired(NOW)

    def test_expiry_at_exactly_now_is_still_valid(self):
        """A token is only expired once now is past expires_at."""
        assert not _token(NOW).is_expired(NOW)

    def test_no_expiry_never_expires(self):
        """Tokens without expires_at are valid indefinitely."""
        assert not _token(None).is_expired(NOW + timedelta(days=3650))

    def test_defaults_to_current_time(self):
        past = datetime.now(timezone.utc) - timedelta(minutes=5)
        assert _token(past).is_expired()
