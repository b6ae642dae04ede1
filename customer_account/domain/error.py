"""Domain layer errors."""

from datetime import datetime


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationError(DomainError):
    """Domain validation error."""

    pass


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str, message: str | None = None):
        self.resource = resource
        self.identifier = identifier
        super().__init__(message or f"{resource} not found: {identifier}")


class MissingParameterError(ValidationError):
    """Callback arrived without code or state."""

    def __init__(self) -> None:
        super().__init__("Missing code or state parameter")


class AuthorizationDeniedError(DomainError):
    """Identity provider redirected back with an error instead of a code."""

    def __init__(self, error: str, description: str | None = None):
        self.error = error
        self.description = description
        message = f"Authorization failed: {error}"
        if description:
            message = f"{message} - {description}"
        super().__init__(message)


class InvalidStateError(DomainError):
    """No pending authorization matches the callback's state.

    Covers forged, replayed and already-consumed states alike.
    """

    def __init__(self) -> None:
        super().__init__("Invalid state parameter or code verifier not found")


class DuplicateStateError(DomainError):
    """A pending authorization already exists for this state."""

    def __init__(self, state: str):
        self.state = state
        super().__init__("A pending authorization already exists for this state")


class MissingAuthenticationError(DomainError):
    """Request carries no session bound to an access token."""

    def __init__(self) -> None:
        super().__init__("No customer authentication found. Please authenticate first.")


class TokenNotFoundError(NotFoundError):
    """Session references an access token that does not exist."""

    def __init__(self, token_id: str):
        super().__init__("Access token", token_id, message="Access token not found")


class TokenExpiredError(DomainError):
    """Access token exists but is past its expiry."""

    def __init__(self, token_id: str, expires_at: datetime):
        self.token_id = token_id
        self.expires_at = expires_at
        super().__init__("Access token has expired")
