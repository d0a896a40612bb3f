"""
Доменная сущность: Статья (Article)

Статья создаётся автором один раз (черновик или отправка на модерацию).
Дальше её меняют только внешние системы: модерация, лайки, комментарии,
просмотры. Ядро их не выполняет, а только перечитывает.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional, List

from blogify.domain.value_objects.article_status import ArticleStatus
from blogify.domain.value_objects.tag_set import TagSet
from blogify.shared.exceptions.domain_exceptions import DomainValidationError


@dataclass
class Article:
    """
    Доменная сущность статьи.

    Инварианты:
    - Один автор и один статус
    - Заголовок не может быть пустым
    - Счётчики неотрицательные
    - Теги уникальны и непустые
    """

    # =========================================================================
    # Идентификация
    # =========================================================================
    id: Optional[str] = None
    author_id: str = ""

    # =========================================================================
    # Контент
    # =========================================================================
    title: str = ""
    body: str = ""
    excerpt: Optional[str] = None
    featured_image: Optional[str] = None
    tags: List[str] = field(default_factory=list)

    # =========================================================================
    # Статус и счётчики (меняет только бэкенд)
    # =========================================================================
    status: ArticleStatus = ArticleStatus.DRAFT
    likes_count: int = 0
    comments_count: int = 0
    views_count: int = 0

    created_at: Optional[datetime] = None

    def __post_init__(self):
        """Валидация инвариантов после инициализации."""
        self.status = ArticleStatus(self.status)
        self.tags = TagSet(self.tags).as_list()
        self.validate()

    def validate(self) -> None:
        """
        Проверка инвариантов сущности.

        Исключения:
            DomainValidationError: Если инварианты нарушены
        """
        if not self.author_id:
            raise DomainValidationError("Article must have an author")

        if not self.title or len(self.title.strip()) == 0:
            raise DomainValidationError("Article title cannot be empty")

        for name in ("likes_count", "comments_count", "views_count"):
            if getattr(self, name) < 0:
                raise DomainValidationError(f"Article {name} cannot be negative")

    @property
    def is_published(self) -> bool:
        return self.status.is_public()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Article):
            return False
        if self.id is None or other.id is None:
            return self is other
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id) if self.id is not None else id(self)

    def __repr__(self) -> str:
        return f"Article(id={self.id}, title='{self.title[:50]}', status={self.status.value})"
