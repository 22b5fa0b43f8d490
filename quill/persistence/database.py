"""Async PostgreSQL engine and session factory."""

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from quill.config import Settings


def create_engine(settings: Settings) -> AsyncEngine:
    """Create the engine for ``settings.database``.

    SQL is echoed in debug mode.
    """
    database = settings.database
    return create_async_engine(
        database.url,
        echo=settings.debug,
        pool_pre_ping=True,
        pool_size=database.pool_size,
        max_overflow=database.max_overflow,
    )


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Create the factory for request-scoped sessions.

    Repositories flush explicitly and return domain models, so nothing is
    expired on commit.
    """
    return async_sessionmaker(engine, expire_on_commit=False, autoflush=False)
