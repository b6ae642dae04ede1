"""Customer session cookie.

The cookie holds only the id of a stored access token, signed with the
session secret so it cannot be forged or altered client-side.
"""

import logging
from datetime import datetime, timedelta, timezone
from uuid import UUID

import jwt
from starlette.responses import Response

from customer_account.config import SessionSettings
from customer_account.domain.value import AccessTokenId

logger = logging.getLogger(__name__)

TOKEN_ID_CLAIM = "customer_token_id"


class CustomerSessionStorage:
    """Reads, writes and destroys the customer session cookie.

    The session's lifetime (max_age_seconds) is independent of the access
    token's own expiry: either may lapse first.
    """

    def __init__(self, settings: SessionSettings, secure: bool) -> None:
        """Initialize session storage.

        Args:
            settings: Session cookie settings
            secure: Whether the cookie is restricted to HTTPS
        """
        self.settings = settings
        self.secure = secure

    @property
    def cookie_name(self) -> str:
        return self.settings.cookie_name

    def encode(self, token_id: AccessTokenId, now: datetime | None = None) -> str:
        """Sign a session value for the given token id.

        Args:
            token_id: Access token id to bind to the session
            now: Issue instant (defaults to current UTC time)

        Returns:
            Signed cookie value
        """
        now = now or datetime.now(timezone.utc)
        payload = {
            TOKEN_ID_CLAIM: str(token_id),
            "iat": now,
            "exp": now + timedelta(seconds=self.settings.max_age_seconds),
        }
        return jwt.encode(payload, self.settings.secret, algorithm=self.settings.algorithm)

    def get_customer_token_id(self, cookie: str | None) -> AccessTokenId | None:
        """Resolve the access token id from a session cookie.

        Tampered, expired and malformed cookies all read as no session.

        Args:
            cookie: Raw cookie value, if the browser sent one

        Returns:
            Access token id, or None when there is no valid session
        """
        if not cookie:
            return None

        try:
            payload = jwt.decode(
                cookie, self.settings.secret, algorithms=[self.settings.algorithm]
            )
        except jwt.ExpiredSignatureError:
            logger.info("Customer session expired")
            return None
        except jwt.InvalidTokenError as e:
            logger.warning(f"Rejected customer session cookie: {e}")
            return None

        try:
            return AccessTokenId(UUID(payload[TOKEN_ID_CLAIM]))
        except (KeyError, TypeError, ValueError):
            logger.warning("Customer session cookie has no valid token id")
            return None

    def commit(self, response: Response, token_id: AccessTokenId) -> None:
        """Attach the session cookie to a response.

        Args:
            response: Outgoing response
            token_id: Access token id to store
        """
        response.set_cookie(
            key=self.settings.cookie_name,
            value=self.encode(token_id),
            max_age=self.settings.max_age_seconds,
            path="/",
            httponly=True,
            secure=self.secure,
            samesite="lax",
        )

    def destroy(self, response: Response) -> None:
        """Expire the session cookie on the client.

        Args:
            response: Outgoing response
        """
        response.delete_cookie(
            key=self.settings.cookie_name,
            path="/",
            httponly=True,
            secure=self.secure,
            samesite="lax",
        )
