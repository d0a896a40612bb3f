"""
CQRS Command: CreateArticleCommand

Команда для создания новой статьи.
"""

from dataclasses import dataclass
from typing import Optional, Tuple

from blogify.domain.value_objects.article_status import ArticleStatus


@dataclass(frozen=True)
class CreateArticleCommand:
    """
    Команда создания статьи.

    Иммутабельна (frozen=True) - следует принципу CQRS.
    """

    # Required
    author_id: str
    title: str
    body: str
    status: ArticleStatus

    # Optional
    excerpt: Optional[str] = None
    featured_image: Optional[str] = None
    tags: Tuple[str, ...] = ()
