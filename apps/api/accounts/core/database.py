"""Database connection and session management."""

from contextlib import asynccontextmanager
from typing import AsyncGenerator

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import NullPool

from accounts.core.config import settings


def _engine_options() -> dict:
    """Pool options for the configured database URL."""
    options = {"echo": settings.DEBUG, "pool_pre_ping": True}
    if settings.is_sqlite:
        # SQLite connections must not outlive the event loop that opened them
        options["poolclass"] = NullPool
    else:
        options["pool_size"] = settings.DATABASE_POOL_SIZE
        options["max_overflow"] = settings.DATABASE_MAX_OVERFLOW
    return options


# Create async engine
async_engine = create_async_engine(settings.DATABASE_URL_ASYNC, **_engine_options())

# Create session factory
async_session_maker = async_sessionmaker(
    async_engine,
    class_=AsyncSession,
    expire_on_commit=False,
    autoflush=False
)


@asynccontextmanager
async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """
    Dependency to get async database session.
    
    Yields:
        AsyncSession: Database session
    """
    async with async_session_maker() as session:
        try:
            yield session
            # Don't auto-commit - let the caller decide
        except Exception:
            await session.rollback()
            raise
        finally:
            await session.close()


async def init_db():
    """Create database tables for all registered models"""
    # Import models to ensure they are registered
    from accounts.models import Base, user  # noqa: F401
    
    async with async_engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def drop_db():
    """Drop all tables created by init_db"""
    from accounts.models import Base
    
    async with async_engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
