"""Unit of work over the request's SQLAlchemy session."""

from sqlalchemy.ext.asyncio import AsyncSession

from customer_account.domain.repository.unit_of_work import UnitOfWork


class SqlAlchemyUnitOfWork(UnitOfWork):
    """Commits the session shared by the request's repositories."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def commit(self) -> None:
        await self.session.commit()
