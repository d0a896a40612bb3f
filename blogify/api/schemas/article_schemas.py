"""
Pydantic schemas для API статей.
"""

from datetime import datetime
from typing import Optional, List
from pydantic import BaseModel, Field

from blogify.application.composer.article_composer import SaveOutcome
from blogify.domain.entities.article import Article
from blogify.domain.value_objects.article_status import ArticleStatus
from blogify.shared.utils.time_ago import time_ago

CARD_TAG_LIMIT = 3


class CreateArticleRequest(BaseModel):
    """Запрос на создание статьи (поля формы редактора)."""

    title: str = ""
    excerpt: Optional[str] = None
    content: str = ""
    featured_image: Optional[str] = None
    tags: List[str] = []
    status: ArticleStatus = ArticleStatus.DRAFT


class ArticleCardResponse(BaseModel):
    """Карточка статьи для лент и кабинета."""

    id: Optional[str]
    author_id: str
    title: str
    excerpt: Optional[str]
    featured_image: Optional[str]
    tags: List[str]
    status: ArticleStatus
    status_color: str
    likes_count: int
    comments_count: int
    views_count: int
    created_at: Optional[datetime]
    created_ago: str

    @classmethod
    def from_entity(cls, entity: Article, now: Optional[datetime] = None) -> "ArticleCardResponse":
        """Создать из entity (в карточке не больше трёх тегов)."""
        return cls(
            id=entity.id,
            author_id=entity.author_id,
            title=entity.title,
            excerpt=entity.excerpt,
            featured_image=entity.featured_image,
            tags=entity.tags[:CARD_TAG_LIMIT],
            status=entity.status,
            status_color=entity.status.badge_color,
            likes_count=entity.likes_count,
            comments_count=entity.comments_count,
            views_count=entity.views_count,
            created_at=entity.created_at,
            created_ago=time_ago(entity.created_at, now),
        )


class SaveArticleResponse(BaseModel):
    """Ответ на сохранение."""

    article: ArticleCardResponse
    message: str
    redirect_to: str = Field(..., description="Куда перейти после сохранения")

    @classmethod
    def from_outcome(cls, outcome: SaveOutcome) -> "SaveArticleResponse":
        return cls(
            article=ArticleCardResponse.from_entity(outcome.article),
            message=outcome.message,
            redirect_to=outcome.redirect_to,
        )
