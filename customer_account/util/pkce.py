"""PKCE (Proof Key for Code Exchange) utilities for OAuth security."""

import secrets
from base64 import urlsafe_b64encode
from hashlib import sha256

VERIFIER_BYTES = 32
STATE_BYTES = 16


def _b64url(data: bytes) -> str:
    return urlsafe_b64encode(data).rstrip(b"=").decode("ascii")


def generate_code_verifier() -> str:
    """Generate a PKCE code verifier.

    Returns:
        Base64url string (no padding) encoding 32 random bytes
    """
    return _b64url(secrets.token_bytes(VERIFIER_BYTES))


def generate_code_challenge(verifier: str) -> str:
    """Derive the S256 challenge for a verifier.

    Args:
        verifier: Code verifier string

    Returns:
        Base64url encoded SHA-256 digest of the verifier's ASCII bytes

    Example:
        >>> generate_code_challenge("dBjftJeZ4CVP-mB92K27uhbUJU1p1r_wW1gFWFOEjXk")
        'E9Melhoa2OwvFrEMTJguCHaoeK1t8URWbuGJSstw-cM'
    """
    return _b64url(sha256(verifier.encode("ascii")).digest())


def generate_state() -> str:
    """Generate an anti-CSRF state token.

    Returns:
        Base64url string (no padding) encoding 16 random bytes
    """
    return _b64url(secrets.token_bytes(STATE_BYTES))


def generate_pkce_pair() -> tuple[str, str]:
    """Generate a verifier and its challenge.

    Returns:
        Tuple of (verifier, challenge)
    """
    verifier = generate_code_verifier()
    return (verifier, generate_code_challenge(verifier))
