"""Mappers for converting between database rows and domain models."""

from typing import Any, Dict
from uuid import UUID

from customer_account.domain.model import CodeVerifier, CustomerAccessToken
from customer_account.domain.value import AccessTokenId, CodeVerifierId


def _uuid(value: Any) -> UUID:
    return UUID(value) if isinstance(value, str) else value


def row_to_code_verifier(row: Dict[str, Any]) -> CodeVerifier:
    """Convert database row to CodeVerifier domain model.

    Args:
        row: Database row as dict

    Returns:
        CodeVerifier domain model
    """
    return CodeVerifier(
        id=CodeVerifierId(_uuid(row["id"])),
        state=row["state"],
        verifier=row["verifier"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def code_verifier_to_dict(code_verifier: CodeVerifier) -> Dict[str, Any]:
    """Convert CodeVerifier domain model to database dict."""
    return code_verifier.model_dump()


def row_to_access_token(row: Dict[str, Any]) -> CustomerAccessToken:
    """Convert database row to CustomerAccessToken domain model.

    Args:
        row: Database row as dict

    Returns:
        CustomerAccessToken domain model
    """
    return CustomerAccessToken(
        id=AccessTokenId(_uuid(row["id"])),
        shop=row["shop"],
        access_token=row["access_token"],
        expires_at=row.get("expires_at"),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def access_token_to_dict(token: CustomerAccessToken) -> Dict[str, Any]:
    """Convert CustomerAccessToken domain model to database dict."""
    return token.model_dump()
