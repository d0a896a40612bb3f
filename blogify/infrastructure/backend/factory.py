"""
Выбор адаптера IDataAccessClient по настройкам.
"""

from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

from blogify.infrastructure.backend.data_access import IDataAccessClient
from blogify.infrastructure.config.settings import Settings, get_settings


@asynccontextmanager
async def open_data_client(
    settings: Optional[Settings] = None,
    access_token: Optional[str] = None,
) -> AsyncIterator[IDataAccessClient]:
    """
    Открыть клиент на время работы с бэкендом.

    rest — PostgREST от имени пользователя (access_token) или анонимно;
    sql — сессия SQLAlchemy.
    """
    settings = settings or get_settings()

    if settings.data_backend == "sql":
        from blogify.infrastructure.backend.sql_client import SqlDataAccessClient
        from blogify.infrastructure.config.database import get_session_factory

        async with get_session_factory()() as session:
            yield SqlDataAccessClient(session)
    else:
        from blogify.infrastructure.backend.supabase_rest import SupabaseRestClient

        async with SupabaseRestClient(settings, access_token=access_token) as client:
            yield client
