# -*- coding: utf-8 -*-
"""
Application Service кабинета автора.

Загружает статьи и профиль пользователя, считает итоги и раскладывает
статьи по вкладкам статусов.
"""

import asyncio
import logging
from dataclasses import dataclass, field
from typing import Dict, List, Optional

from blogify.application.cache.query_cache import QueryCache
from blogify.application.queries.article_queries import ProfileQuery, UserArticlesQuery
from blogify.domain.entities.article import Article
from blogify.domain.entities.identity import Identity
from blogify.domain.entities.profile import Profile
from blogify.domain.repositories.article_repository import IArticleRepository, IProfileRepository
from blogify.domain.services.dashboard_aggregator import ArticleTotals, partition_all, totals
from blogify.domain.value_objects.article_status import ArticleStatus
from blogify.shared.exceptions.domain_exceptions import EntityNotFoundError
from blogify.shared.exceptions.infrastructure_exceptions import BackendError

logger = logging.getLogger(__name__)

ALL_TAB = "all"


@dataclass
class DashboardView:
    """Данные кабинета для отображения."""

    greeting_name: str
    articles: List[Article] = field(default_factory=list)
    totals: ArticleTotals = field(default_factory=ArticleTotals)
    partitions: Dict[ArticleStatus, List[Article]] = field(default_factory=dict)
    error: Optional[str] = None

    @property
    def article_count(self) -> int:
        return len(self.articles)

    @property
    def is_empty(self) -> bool:
        return self.error is None and not self.articles

    def tab(self, name: str) -> List[Article]:
        """Статьи вкладки: "all" или значение статуса."""
        if name == ALL_TAB:
            return list(self.articles)
        return list(self.partitions.get(ArticleStatus(name), []))

    def tabs(self) -> List[str]:
        """Вкладки в порядке показа."""
        return [ALL_TAB] + [status.value for status in ArticleStatus]


class DashboardService:
    """Кабинет автора."""

    def __init__(
        self,
        articles: IArticleRepository,
        profiles: IProfileRepository,
        cache: QueryCache,
    ):
        self.articles = articles
        self.profiles = profiles
        self.cache = cache

    async def load(self, identity: Identity) -> DashboardView:
        """
        Собрать кабинет пользователя.

        Статьи и профиль запрашиваются параллельно. Ошибка профиля не мешает
        кабинету, ошибка статей даёт пустой кабинет с сообщением.
        """
        articles_result, profile_result = await asyncio.gather(
            self.user_articles(identity.id),
            self.profile(identity.id),
            return_exceptions=True,
        )

        greeting = identity.handle
        if isinstance(profile_result, BaseException):
            logger.warning(f"Profile lookup failed for {identity.id}: {profile_result}")
        elif profile_result is None:
            logger.debug(f"No profile for {identity.id}, greeting by handle")
        else:
            greeting = profile_result.display_name(identity.handle)

        if isinstance(articles_result, BackendError):
            return DashboardView(greeting_name=greeting, error=articles_result.message)
        if isinstance(articles_result, BaseException):
            raise articles_result

        return DashboardView(
            greeting_name=greeting,
            articles=articles_result,
            totals=totals(articles_result),
            partitions=partition_all(articles_result),
        )

    async def user_articles(self, user_id: str) -> List[Article]:
        query = UserArticlesQuery(user_id)
        return await self.cache.fetch(query.key, lambda: self.articles.find_by_author(user_id))

    async def profile(self, user_id: str) -> Optional[Profile]:
        """Профиль или None, если строки нет (это не ошибка)."""
        query = ProfileQuery(user_id)

        async def fetch_profile() -> Optional[Profile]:
            try:
                return await self.profiles.find_by_user_id(user_id)
            except EntityNotFoundError:
                return None

        return await self.cache.fetch(query.key, fetch_profile)
