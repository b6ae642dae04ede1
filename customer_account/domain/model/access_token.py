"""Customer access token entity."""

from datetime import datetime, timezone
from typing import Optional

from pydantic import Field

from customer_account.domain.model.common import DomainModel
from customer_account.domain.value import AccessTokenId


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class CustomerAccessToken(DomainModel):
    """Bearer token issued by the identity provider for one customer.

    Created once after a successful code exchange and never mutated. A token
    without expires_at never expires on our side.
    """

    id: AccessTokenId
    shop: str
    access_token: str
    expires_at: Optional[datetime] = None
    created_at: datetime = Field(default_factory=_utcnow)
    updated_at: datetime = Field(default_factory=_utcnow)

    def is_expired(self, now: datetime | None = None) -> bool:
        """Check whether the token is past its expiry.

        Args:
            now: Reference instant (defaults to current UTC time)

        Returns:
            True if expires_at is set and lies before now
        """
        if self.expires_at is None:
            return False
        now = now or _utcnow()
        return self.expires_at < now
