"""
CQRS Queries: выборки статей и их ключи кэша.
"""

from dataclasses import dataclass
from typing import List

from blogify.application.cache.query_cache import QueryKey
from blogify.domain.entities.article import Article
from blogify.domain.value_objects.article_status import ArticleStatus

ARTICLES = "articles"
PROFILE = "profile"


@dataclass(frozen=True)
class ListingQuery:
    """
    Публичная лента: опубликованные статьи по убыванию order_by.

    При равных значениях порядок по id (возрастание).
    """

    name: str
    order_by: str
    limit: int
    status: ArticleStatus = ArticleStatus.APPROVED

    @property
    def key(self) -> QueryKey:
        return QueryKey.of(ARTICLES, listing=self.name)


LATEST = ListingQuery(name="latest", order_by="created_at", limit=6)
TRENDING = ListingQuery(name="trending", order_by="likes_count", limit=3)

LISTINGS = (LATEST, TRENDING)


@dataclass(frozen=True)
class UserArticlesQuery:
    """Все статьи автора, новые первыми."""

    author_id: str

    @property
    def key(self) -> QueryKey:
        return QueryKey.of(ARTICLES, author_id=self.author_id)


@dataclass(frozen=True)
class ProfileQuery:
    """Профиль пользователя."""

    user_id: str

    @property
    def key(self) -> QueryKey:
        return QueryKey.of(PROFILE, user_id=self.user_id)


def affected_keys(article: Article) -> List[QueryKey]:
    """
    Ключи кэша, которые устаревают после вставки статьи.

    Список статей автора меняется всегда, публичные ленты — только если
    статья попала в них по статусу.
    """
    keys = [UserArticlesQuery(article.author_id).key]
    keys.extend(query.key for query in LISTINGS if query.status == article.status)
    return keys
