"""Pending authorization entity.

Binds the anti-CSRF state sent to the identity provider to the PKCE
verifier needed to redeem the authorization code.
"""

from datetime import datetime, timezone

from pydantic import Field

from customer_account.domain.model.common import DomainModel
from customer_account.domain.value import CodeVerifierId


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class CodeVerifier(DomainModel):
    """State-bound PKCE verifier awaiting its callback.

    There is at most one record per state, and it is consumed exactly once.
    """

    id: CodeVerifierId
    state: str
    verifier: str
    created_at: datetime = Field(default_factory=_utcnow)
    updated_at: datetime = Field(default_factory=_utcnow)
