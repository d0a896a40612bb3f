"""
Repository Interfaces: IArticleRepository, IProfileRepository

Порты для работы с хранилищем статей и профилей.
Реализации (адаптеры) находятся в infrastructure layer.
"""

from abc import ABC, abstractmethod
from typing import List

from blogify.domain.entities.article import Article
from blogify.domain.entities.profile import Profile
from blogify.domain.value_objects.article_status import ArticleStatus


class IArticleRepository(ABC):
    """
    Интерфейс репозитория статей.

    Сортировки всегда дополняются вторичным ключом id по возрастанию,
    чтобы порядок при равных значениях был детерминированным.
    """

    @abstractmethod
    async def save(self, article: Article) -> Article:
        """
        Сохранить новую статью одной вставкой.

        Args:
            article: Статья без id

        Returns:
            Статья в том виде, в каком её вернул бэкенд (с id и created_at)
        """
        pass

    @abstractmethod
    async def find_by_author(self, author_id: str) -> List[Article]:
        """
        Все статьи автора, новые первыми.

        Args:
            author_id: ID автора

        Returns:
            Список статей
        """
        pass

    @abstractmethod
    async def find_by_status(
        self,
        status: ArticleStatus,
        order_by: str,
        limit: int
    ) -> List[Article]:
        """
        Статьи в статусе, по убыванию поля order_by.

        Args:
            status: Фильтр по статусу
            order_by: Поле первичной сортировки (по убыванию)
            limit: Лимит записей

        Returns:
            Список статей (без текста статьи)
        """
        pass


class IProfileRepository(ABC):
    """Интерфейс репозитория профилей."""

    @abstractmethod
    async def find_by_user_id(self, user_id: str) -> Profile:
        """
        Профиль пользователя.

        Raises:
            EntityNotFoundError: профиля нет
        """
        pass
