"""
Агрегация статей автора для кабинета.

Чистые функции: вход не меняется, порядок сохраняется.
"""

from dataclasses import dataclass
from typing import Dict, List, Sequence

from blogify.domain.entities.article import Article
from blogify.domain.value_objects.article_status import ArticleStatus


@dataclass(frozen=True)
class ArticleTotals:
    """Суммарные счётчики по статьям."""

    likes: int = 0
    views: int = 0
    comments: int = 0


def totals(articles: Sequence[Article]) -> ArticleTotals:
    """
    Суммы лайков, просмотров и комментариев.

    Пустой список даёт нули; отсутствующий счётчик считается нулём.
    """
    likes = views = comments = 0
    for article in articles:
        likes += getattr(article, "likes_count", 0) or 0
        views += getattr(article, "views_count", 0) or 0
        comments += getattr(article, "comments_count", 0) or 0
    return ArticleTotals(likes=likes, views=views, comments=comments)


def partition_by_status(articles: Sequence[Article], status: ArticleStatus) -> List[Article]:
    """Статьи с данным статусом, в исходном порядке."""
    status = ArticleStatus(status)
    return [article for article in articles if article.status == status]


def partition_all(articles: Sequence[Article]) -> Dict[ArticleStatus, List[Article]]:
    """
    Разбиение по всем статусам.

    Каждая статья попадает ровно в одну группу.
    """
    partitions: Dict[ArticleStatus, List[Article]] = {status: [] for status in ArticleStatus}
    for article in articles:
        partitions[article.status].append(article)
    return partitions
