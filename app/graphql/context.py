from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker
from strawberry.fastapi import BaseContext

from app.database import get_session_factory

from .loaders import Loaders


class GraphQLContext(BaseContext):
    """
    Per-request context handed to every resolver.

    Carries the store capability (a session factory) explicitly instead of
    resolvers reaching for a module-level session.  The relationship
    loaders live here too, so their cache never outlives the request.
    """

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]) -> None:
        super().__init__()
        self.session_factory = session_factory
        self.loaders = Loaders(self.session)

    @asynccontextmanager
    async def session(self) -> AsyncIterator[AsyncSession]:
        """
        Open a session for one resolver call, committing on success.

        Each field gets its own unit of work, so a failed mutation rolls
        back only itself and not its siblings in the same request.
        """
        async with self.session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise


async def get_context(
    session_factory: async_sessionmaker[AsyncSession] = Depends(get_session_factory),
) -> GraphQLContext:
    return GraphQLContext(session_factory)
