"""Unit tests for InitiateAuthorizationUseCase."""

from urllib.parse import parse_qs, urlparse

import pytest

from customer_account.adapter.error import DiscoveryError
from customer_account.application.usecase.auth import InitiateAuthorizationUseCase
from customer_account.application.usecase.auth.initiate_authorization import (
    InitiateAuthorizationRequest,
)
from customer_account.domain.repository import CodeVerifierRepository, UnitOfWork
from customer_account.domain.service import CustomerAccountClient
from customer_account.util.pkce import generate_code_challenge
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked, no docker needed
unit_env = create_env_fixture()


class TestInitiateAuthorization:
    """Tests for InitiateAuthorizationUseCase."""

    @pytest.mark.asyncio
    async def test_stores_verifier_and_builds_url(self, unit_env):
        """Initiation should store state -> verifier and return the URL."""
        # Arrange
        use_case = await unit_env.get(InitiateAuthorizationUseCase)
        repo = await unit_env.get(CodeVerifierRepository)
        client = await unit_env.get(CustomerAccountClient)

        # Act
        response = await use_case.execute(
            InitiateAuthorizationRequest(host="app.example.com")
        )

        # Assert
        assert response.authorization_url.startswith(
            client.openid_configuration.authorization_endpoint
        )
        params = parse_qs(urlparse(response.authorization_url).query)
        assert params["state"] == [response.state]
        assert params["redirect_uri"] == [
            "https://app.example.com/customer-account-api/callback"
        ]

        stored = await repo.find_by_state(response.state)
        assert stored is not None
        assert params["code_challenge"] == [generate_code_challenge(stored.verifier)]

    @pytest.mark.asyncio
    async def test_callback_url_keeps_port(self, unit_env):
        use_case = await unit_env.get(InitiateAuthorizationUseCase)

        response = await use_case.execute(
            InitiateAuthorizationRequest(host="localhost:8443")
        )

        params = parse_qs(urlparse(response.authorization_url).query)
        assert params["redirect_uri"] == [
            "https://localhost:8443/customer-account-api/callback"
        ]

    @pytest.mark.asyncio
    async def test_discovery_failure_stores_nothing(self, unit_env):
        """Without an authorization endpoint no verifier is written."""
        # Arrange
        use_case = await unit_env.get(InitiateAuthorizationUseCase)
        repo = await unit_env.get(CodeVerifierRepository)
        client = await unit_env.get(CustomerAccountClient)
        client.discovery_error = DiscoveryError(
            "Failed to fetch OpenID configuration: Internal Server Error",
            status_code=500,
        )

        # Act & Assert
        with pytest.raises(DiscoveryError):
            await use_case.execute(InitiateAuthorizationRequest(host="app.example.com"))

        assert repo.count() == 0

    @pytest.mark.asyncio
    async def test_each_initiation_creates_its_own_state(self, unit_env):
        use_case = await unit_env.get(InitiateAuthorizationUseCase)
        repo = await unit_env.get(CodeVerifierRepository)

        first = await use_case.execute(InitiateAuthorizationRequest(host="app.example.com"))
        second = await use_case.execute(
            InitiateAuthorizationRequest(host="app.example.com")
        )

        assert first.state != second.state
        assert repo.count() == 2

    @pytest.mark.asyncio
    async def test_commits_stored_verifier(self, unit_env):
        """The verifier is committed before the URL is handed back."""
        use_case = await unit_env.get(InitiateAuthorizationUseCase)
        unit_of_work = await unit_env.get(UnitOfWork)

        await use_case.execute(InitiateAuthorizationRequest(host="app.example.com"))

        assert unit_of_work.commits == 1

    @pytest.mark.asyncio
    async def test_discovery_failure_does_not_commit(self, unit_env):
        use_case = await unit_env.get(InitiateAuthorizationUseCase)
        unit_of_work = await unit_env.get(UnitOfWork)
        client = await unit_env.get(CustomerAccountClient)
        client.discovery_error = DiscoveryError("Failed to fetch OpenID configuration")

        with pytest.raises(DiscoveryError):
            await use_case.execute(InitiateAuthorizationRequest(host="app.example.com"))

        assert unit_of_work.commits == 0
