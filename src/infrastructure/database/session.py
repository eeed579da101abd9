"""Database engine and session factory for the Supabase Postgres store."""

from typing import AsyncGenerator

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from core.config import settings


def _connect_args(database_url: str) -> dict:
    """Driver options for the given URL.

    Supavisor runs in transaction mode, which breaks asyncpg's prepared
    statement cache, so the cache is off behind the pooler.
    """
    if "supabase.com" in database_url:
        return {"statement_cache_size": 0}
    return {}


# One engine per process, shared by every webhook invocation
engine = create_async_engine(
    settings.async_database_url,
    echo=settings.debug,
    pool_pre_ping=True,
    connect_args=_connect_args(settings.database_url),
)

async_session_factory = async_sessionmaker(
    bind=engine,
    class_=AsyncSession,
    expire_on_commit=False,
    autoflush=False,
)


async def get_async_session() -> AsyncGenerator[AsyncSession, None]:
    """Dependency yielding a session for ad-hoc queries such as health probes."""
    async with async_session_factory() as session:
        yield session
