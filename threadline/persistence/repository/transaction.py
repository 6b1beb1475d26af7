"""SQLAlchemy transaction manager."""

import logfire
from sqlalchemy.ext.asyncio import AsyncSession

from threadline.domain.repository import TransactionManager


class SessionTransactionManager(TransactionManager):
    """Commits the request's session.

    The request scope still commits on close, which is a no-op once this
    has run.
    """

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def commit(self) -> None:
        await self.session.commit()
        logfire.debug("Transaction committed")
