"""
Database configuration (режим data_backend=sql).
"""

from functools import lru_cache

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from blogify.infrastructure.config.settings import get_settings


@lru_cache()
def get_engine() -> AsyncEngine:
    """Async engine, создаётся при первом обращении."""
    settings = get_settings()
    return create_async_engine(
        settings.get_async_database_url(),
        echo=settings.debug,
        pool_size=10,
        max_overflow=5,
        pool_pre_ping=True,
    )


@lru_cache()
def get_session_factory() -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(
        get_engine(),
        class_=AsyncSession,
        expire_on_commit=False,
    )


