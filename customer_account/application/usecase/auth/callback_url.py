"""Callback URL shared by authorization initiation and code exchange."""

CALLBACK_PATH = "/customer-account-api/callback"


def build_callback_url(host: str) -> str:
    """Build our public callback URL from the incoming request's host.

    The same value must be sent as redirect_uri at initiation and at
    code exchange.

    Args:
        host: Host header of the incoming request (may include a port)

    Returns:
        Absolute HTTPS callback URL
    """
    return f"https://{host}{CALLBACK_PATH}"
