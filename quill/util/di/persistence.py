"""Persistence providers."""

from collections.abc import AsyncIterator

import logfire
from dishka import Scope, provide
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from quill.config import Settings
from quill.domain.repository import (
    ArticleRepository,
    CommentRepository,
    GroupRepository,
    SessionRepository,
    UserRepository,
)
from quill.persistence.database import create_engine, create_session_factory
from quill.persistence.repository import (
    PostgresArticleRepository,
    PostgresCommentRepository,
    PostgresGroupRepository,
    PostgresSessionRepository,
    PostgresUserRepository,
)
from quill.util.di.base import ProviderBase
from quill.util.observability import instrument_sqlalchemy


class PersistenceProvider(ProviderBase):
    """Mockable persistence component: the five repositories."""

    __mock_component__ = "persistence"


class ProdPersistenceProvider(PersistenceProvider):
    """PostgreSQL repositories sharing one transaction per request."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    async def get_engine(self, settings: Settings) -> AsyncIterator[AsyncEngine]:
        engine = create_engine(settings)
        instrument_sqlalchemy(engine)
        yield engine
        await engine.dispose()

    @provide(scope=Scope.APP)
    def get_session_factory(
        self, engine: AsyncEngine
    ) -> async_sessionmaker[AsyncSession]:
        return create_session_factory(engine)

    @provide(scope=Scope.REQUEST)
    async def get_session(
        self, session_factory: async_sessionmaker[AsyncSession]
    ) -> AsyncIterator[AsyncSession]:
        """Open the request's transaction.

        Committed when the request scope closes cleanly, rolled back when a
        use case raised.
        """
        async with session_factory() as session:
            try:
                yield session
            except Exception as e:
                logfire.warn(
                    "Rolling back request transaction",
                    error_type=type(e).__name__,
                    error=str(e),
                )
                await session.rollback()
                raise
            await session.commit()

    users = provide(
        PostgresUserRepository, provides=UserRepository, scope=Scope.REQUEST
    )
    groups = provide(
        PostgresGroupRepository, provides=GroupRepository, scope=Scope.REQUEST
    )
    articles = provide(
        PostgresArticleRepository, provides=ArticleRepository, scope=Scope.REQUEST
    )
    comments = provide(
        PostgresCommentRepository, provides=CommentRepository, scope=Scope.REQUEST
    )
    sessions = provide(
        PostgresSessionRepository, provides=SessionRepository, scope=Scope.REQUEST
    )
