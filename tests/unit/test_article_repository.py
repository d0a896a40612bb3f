"""
Unit tests для маппинга строк бэкенда.
"""

from datetime import datetime, timezone

import pytest

from blogify.domain.entities.article import Article
from blogify.domain.value_objects.article_status import ArticleStatus
from blogify.infrastructure.persistence.article_repository_impl import (
    ArticleRepositoryImpl,
    ProfileRepositoryImpl,
)
from blogify.shared.exceptions.domain_exceptions import EntityNotFoundError


def test_to_record():
    article = Article(
        author_id="u1",
        title="Hello",
        body="# Body",
        excerpt="# Body...",
        featured_image="",
        status=ArticleStatus.PENDING,
    )

    record = ArticleRepositoryImpl._to_record(article)

    assert record == {
        "title": "Hello",
        "excerpt": "# Body...",
        "content": "# Body",
        "featured_image": None,
        "author_id": "u1",
        "status": "pending",
        "tags": None,
    }


def test_to_entity_defaults_nulls():
    article = ArticleRepositoryImpl._to_entity({
        "id": 42,
        "author_id": "u1",
        "title": "Hello",
        "tags": None,
        "status": "approved",
        "likes_count": None,
        "created_at": "2024-05-01T12:00:00Z",
    })

    assert article.id == "42"
    assert article.tags == []
    assert article.likes_count == 0
    assert article.views_count == 0
    assert article.body == ""
    assert article.created_at == datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc)


@pytest.mark.asyncio
async def test_profile_not_found(fake_client):
    repository = ProfileRepositoryImpl(fake_client)

    with pytest.raises(EntityNotFoundError):
        await repository.find_by_user_id("nobody")


@pytest.mark.asyncio
async def test_find_by_author_orders_newest_first(fake_client):
    fake_client.add_row("blogs", title="old", author_id="u1", status="draft")
    fake_client.add_row("blogs", title="new", author_id="u1", status="draft")

    articles = await ArticleRepositoryImpl(fake_client).find_by_author("u1")

    assert [a.title for a in articles] == ["new", "old"]
