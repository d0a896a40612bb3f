"""
Application Service для публичных лент (главная страница).
"""

from typing import List

from blogify.application.cache.query_cache import QueryCache
from blogify.application.queries.article_queries import LATEST, TRENDING, ListingQuery
from blogify.domain.entities.article import Article
from blogify.domain.repositories.article_repository import IArticleRepository


class ListingService:
    """
    Ленты опубликованных статей.

    Только чтение; результаты кэшируются по ключу ленты.
    """

    def __init__(self, repository: IArticleRepository, cache: QueryCache):
        self.repository = repository
        self.cache = cache

    async def latest(self) -> List[Article]:
        """Последние опубликованные статьи."""
        return await self.run(LATEST)

    async def trending(self) -> List[Article]:
        """Самые залайканные опубликованные статьи."""
        return await self.run(TRENDING)

    async def run(self, query: ListingQuery) -> List[Article]:
        return await self.cache.fetch(
            query.key,
            lambda: self.repository.find_by_status(query.status, query.order_by, query.limit),
        )
