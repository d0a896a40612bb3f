# -*- coding: utf-8 -*-
"""
Репозитории поверх IDataAccessClient.

Преобразуют строки бэкенда (таблицы blogs, profiles) в доменные сущности
и обратно. Текст статьи хранится в колонке content.
"""

import logging
from datetime import datetime
from typing import Any, Dict, List, Optional

from blogify.domain.entities.article import Article
from blogify.domain.entities.profile import Profile
from blogify.domain.repositories.article_repository import IArticleRepository, IProfileRepository
from blogify.domain.value_objects.article_status import ArticleStatus
from blogify.infrastructure.backend.data_access import IDataAccessClient, Ordering
from blogify.shared.exceptions.domain_exceptions import EntityNotFoundError
from blogify.shared.exceptions.infrastructure_exceptions import RowNotFoundError

logger = logging.getLogger(__name__)

# Колонки карточки статьи (без текста)
CARD_COLUMNS = (
    "id",
    "title",
    "excerpt",
    "featured_image",
    "tags",
    "likes_count",
    "comments_count",
    "views_count",
    "created_at",
    "author_id",
    "status",
)

TIE_BREAKER = Ordering.asc("id")


def _parse_datetime(value: Any) -> Optional[datetime]:
    if value is None or isinstance(value, datetime):
        return value
    return datetime.fromisoformat(str(value).replace("Z", "+00:00"))


class ArticleRepositoryImpl(IArticleRepository):
    """
    Реализация репозитория статей.

    Адаптер в Hexagonal Architecture.
    """

    def __init__(self, client: IDataAccessClient, table: str = "blogs"):
        """
        Инициализация репозитория.

        Аргументы:
            client: Клиент доступа к данным
            table: Таблица статей
        """
        self.client = client
        self.table = table

    async def save(self, article: Article) -> Article:
        """Вставить статью, вернуть строку из бэкенда."""
        row = await self.client.insert(self.table, self._to_record(article))
        saved = self._to_entity(row)
        logger.info(f"Inserted article {saved.id} ({saved.status.value}) for {saved.author_id}")
        return saved

    async def find_by_author(self, author_id: str) -> List[Article]:
        rows = await self.client.select(
            self.table,
            filters={"author_id": author_id},
            order=(Ordering.desc("created_at"), TIE_BREAKER),
        )
        return [self._to_entity(row) for row in rows]

    async def find_by_status(
        self,
        status: ArticleStatus,
        order_by: str,
        limit: int
    ) -> List[Article]:
        rows = await self.client.select(
            self.table,
            filters={"status": ArticleStatus(status).value},
            order=(Ordering.desc(order_by), TIE_BREAKER),
            limit=limit,
            columns=CARD_COLUMNS,
        )
        return [self._to_entity(row) for row in rows]

    # =========================================================================
    # Маппинг Entity ↔ Row
    # =========================================================================

    @staticmethod
    def _to_record(entity: Article) -> Dict[str, Any]:
        """
        Article → запись для вставки.

        id, счётчики и created_at проставляет бэкенд.
        Пустые теги и картинка хранятся как null.
        """
        return {
            "title": entity.title,
            "excerpt": entity.excerpt,
            "content": entity.body,
            "featured_image": entity.featured_image or None,
            "author_id": entity.author_id,
            "status": entity.status.value,
            "tags": list(entity.tags) if entity.tags else None,
        }

    @staticmethod
    def _to_entity(row: Dict[str, Any]) -> Article:
        """Строка бэкенда → Article; null-счётчики и теги становятся 0 и []."""
        return Article(
            id=str(row["id"]) if row.get("id") is not None else None,
            author_id=str(row.get("author_id") or ""),
            title=row.get("title") or "",
            body=row.get("content") or "",
            excerpt=row.get("excerpt"),
            featured_image=row.get("featured_image"),
            tags=row.get("tags") or [],
            status=ArticleStatus(row.get("status") or ArticleStatus.DRAFT.value),
            likes_count=row.get("likes_count") or 0,
            comments_count=row.get("comments_count") or 0,
            views_count=row.get("views_count") or 0,
            created_at=_parse_datetime(row.get("created_at")),
        )


class ProfileRepositoryImpl(IProfileRepository):
    """Реализация репозитория профилей."""

    def __init__(self, client: IDataAccessClient, table: str = "profiles"):
        self.client = client
        self.table = table

    async def find_by_user_id(self, user_id: str) -> Profile:
        try:
            row = await self.client.select_single(self.table, {"user_id": user_id})
        except RowNotFoundError as e:
            raise EntityNotFoundError(f"Profile for user {user_id} not found") from e
        return Profile(user_id=str(row.get("user_id") or user_id), full_name=row.get("full_name"))
