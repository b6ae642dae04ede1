"""Pending authorization domain service."""

from datetime import datetime, timezone
from uuid import uuid4

import logfire

from customer_account.domain.error import InvalidStateError
from customer_account.domain.model.code_verifier import CodeVerifier
from customer_account.domain.repository.code_verifier import CodeVerifierRepository
from customer_account.domain.value import CodeVerifierId, PkceMaterial
from customer_account.util.logging import mask_secret

from .base import Service


class CodeVerifierService(Service):
    """Stores and redeems state-bound PKCE verifiers."""

    def __init__(self, code_verifier_repository: CodeVerifierRepository) -> None:
        """Initialize code verifier service.

        Args:
            code_verifier_repository: Code verifier repository
        """
        self.code_verifier_repository = code_verifier_repository

    async def store(self, material: PkceMaterial) -> CodeVerifier:
        """Persist the verifier for a new authorization attempt.

        Args:
            material: Generated PKCE material

        Returns:
            The stored pending authorization

        Raises:
            DuplicateStateError: If the state is already pending
        """
        state = mask_secret(material.state)
        with logfire.span("code_verifier_service.store", state=state):
            now = datetime.now(timezone.utc)
            code_verifier = CodeVerifier(
                id=CodeVerifierId(uuid4()),
                state=material.state,
                verifier=material.verifier,
                created_at=now,
                updated_at=now,
            )
            saved = await self.code_verifier_repository.save(code_verifier)
            logfire.info("Code verifier stored", state=state)
            return saved

    async def consume(self, state: str) -> CodeVerifier:
        """Redeem the verifier for a callback's state.

        The record is deleted as part of the lookup, so a verifier can never
        be used twice, even if the following token exchange fails.

        Args:
            state: State value from the callback

        Returns:
            The consumed pending authorization

        Raises:
            InvalidStateError: If no pending authorization matches
        """
        masked = mask_secret(state)
        with logfire.span("code_verifier_service.consume", state=masked):
            code_verifier = await self.code_verifier_repository.consume(state)
            if code_verifier is None:
                logfire.warn("Code verifier not found", state=masked)
                raise InvalidStateError()
            logfire.info("Code verifier consumed", state=masked)
            return code_verifier
