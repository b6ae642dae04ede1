"""Unit of work interface."""

from abc import ABC, abstractmethod


class UnitOfWork(ABC):
    """Makes the request's repository writes durable.

    Use cases commit before handing back anything the client will act on
    (a redirect, a session cookie), so the follow-up request always sees
    the written rows.
    """

    @abstractmethod
    async def commit(self) -> None:
        """Commit all writes made so far in this request."""
        pass
