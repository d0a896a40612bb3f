"""
FastAPI Dependencies для DI.
"""

from typing import AsyncIterator, Optional

from fastapi import Depends, Header

from blogify.application.cache.query_cache import QueryCache, get_query_cache
from blogify.application.handlers.article_command_handler import ArticleCommandHandler
from blogify.application.services.dashboard_service import DashboardService
from blogify.application.services.listing_service import ListingService
from blogify.domain.entities.identity import Identity
from blogify.infrastructure.backend.data_access import IDataAccessClient
from blogify.infrastructure.backend.factory import open_data_client
from blogify.infrastructure.backend.supabase_auth import SupabaseAuthClient
from blogify.infrastructure.config.settings import Settings, get_settings
from blogify.infrastructure.persistence.article_repository_impl import (
    ArticleRepositoryImpl,
    ProfileRepositoryImpl,
)


def get_access_token(authorization: Optional[str] = Header(default=None)) -> Optional[str]:
    """Bearer токен из заголовка Authorization."""
    if not authorization:
        return None
    scheme, _, token = authorization.partition(" ")
    if scheme.lower() != "bearer" or not token:
        return None
    return token.strip()


async def get_current_identity(
    token: Optional[str] = Depends(get_access_token),
    settings: Settings = Depends(get_settings),
) -> Identity:
    """DI для текущего пользователя (401 если не вошёл)."""
    async with SupabaseAuthClient(settings) as auth:
        return await auth.get_user(token or "")


async def get_data_client(
    token: Optional[str] = Depends(get_access_token),
    settings: Settings = Depends(get_settings),
) -> AsyncIterator[IDataAccessClient]:
    """DI для клиента данных на время запроса."""
    async with open_data_client(settings, access_token=token) as client:
        yield client


def get_cache() -> QueryCache:
    return get_query_cache()


def get_article_repository(
    client: IDataAccessClient = Depends(get_data_client),
    settings: Settings = Depends(get_settings),
) -> ArticleRepositoryImpl:
    """DI для repository."""
    return ArticleRepositoryImpl(client, table=settings.articles_table)


def get_profile_repository(
    client: IDataAccessClient = Depends(get_data_client),
    settings: Settings = Depends(get_settings),
) -> ProfileRepositoryImpl:
    return ProfileRepositoryImpl(client, table=settings.profiles_table)


def get_listing_service(
    repository: ArticleRepositoryImpl = Depends(get_article_repository),
    cache: QueryCache = Depends(get_cache),
) -> ListingService:
    """DI для service."""
    return ListingService(repository, cache)


def get_dashboard_service(
    articles: ArticleRepositoryImpl = Depends(get_article_repository),
    profiles: ProfileRepositoryImpl = Depends(get_profile_repository),
    cache: QueryCache = Depends(get_cache),
) -> DashboardService:
    return DashboardService(articles, profiles, cache)


def get_command_handler(
    repository: ArticleRepositoryImpl = Depends(get_article_repository),
    cache: QueryCache = Depends(get_cache),
) -> ArticleCommandHandler:
    return ArticleCommandHandler(repository, cache)
