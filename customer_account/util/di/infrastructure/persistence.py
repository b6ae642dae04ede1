"""Persistence infrastructure providers."""

from collections.abc import AsyncIterator

from dishka import Scope, provide
import logfire
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from customer_account.config import Settings
from customer_account.domain.repository import (
    AccessTokenRepository,
    CodeVerifierRepository,
    UnitOfWork,
)
from customer_account.persistence.database import (
    create_engine,
    create_session_factory,
)
from customer_account.persistence.repository import (
    PostgresAccessTokenRepository,
    PostgresCodeVerifierRepository,
)
from customer_account.persistence.unit_of_work import SqlAlchemyUnitOfWork
from customer_account.util.di.base import ProviderBase
from customer_account.util.observability import instrument_sqlalchemy


class PersistenceProvider(ProviderBase):
    """Persistence component base."""

    __mock_component__ = "persistence"


class ProdPersistenceProvider(PersistenceProvider):
    """Production persistence provider using PostgreSQL."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    async def get_engine(self, settings: Settings) -> AsyncIterator[AsyncEngine]:
        """Provide database engine, disposed when the container closes."""
        engine = create_engine(settings)
        instrument_sqlalchemy(engine)
        yield engine
        await engine.dispose()

    @provide(scope=Scope.APP)
    def get_session_factory(
        self, engine: AsyncEngine
    ) -> async_sessionmaker[AsyncSession]:
        """Provide session factory."""
        return create_session_factory(engine)

    @provide(scope=Scope.REQUEST)
    async def get_session(
        self, session_factory: async_sessionmaker[AsyncSession]
    ) -> AsyncIterator[AsyncSession]:
        """Provide database session for request scope.

        Use cases commit through UnitOfWork before the response is built.
        Whatever is still pending when the request scope closes is committed
        here, or rolled back if an exception was raised. Routes render flow
        failures as pages, so a consumed verifier stays deleted even when the
        following token exchange fails.
        """
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception as e:
                logfire.warn("Session rollback", error=str(e))
                await session.rollback()
                raise

    @provide(scope=Scope.REQUEST)
    def get_code_verifier_repository(
        self, session: AsyncSession
    ) -> CodeVerifierRepository:
        """Provide CodeVerifier repository."""
        return PostgresCodeVerifierRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_access_token_repository(
        self, session: AsyncSession
    ) -> AccessTokenRepository:
        """Provide AccessToken repository."""
        return PostgresAccessTokenRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_unit_of_work(self, session: AsyncSession) -> UnitOfWork:
        """Provide unit of work sharing the repositories' session."""
        return SqlAlchemyUnitOfWork(session)
