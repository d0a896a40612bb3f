"""
Unit tests для кабинета автора.
"""

import pytest

from blogify.application.services.dashboard_service import ALL_TAB, DashboardService
from blogify.domain.value_objects.article_status import ArticleStatus
from blogify.infrastructure.persistence.article_repository_impl import (
    ArticleRepositoryImpl,
    ProfileRepositoryImpl,
)
from blogify.shared.exceptions.infrastructure_exceptions import BackendError


@pytest.fixture
def service(fake_client, cache):
    return DashboardService(
        ArticleRepositoryImpl(fake_client),
        ProfileRepositoryImpl(fake_client),
        cache,
    )


def _add_article(fake_client, status, author_id="user-1", **row):
    return fake_client.add_row(
        "blogs", title="Post", content="Body", author_id=author_id, status=status, **row
    )


@pytest.mark.asyncio
async def test_greeting_from_profile(service, fake_client, identity):
    fake_client.add_row("profiles", user_id="user-1", full_name="Ada Lovelace")

    view = await service.load(identity)

    assert view.greeting_name == "Ada Lovelace"


@pytest.mark.asyncio
async def test_greeting_falls_back_to_email(service, identity):
    view = await service.load(identity)

    assert view.greeting_name == "ada@example.com"
    assert view.error is None
    assert view.is_empty


@pytest.mark.asyncio
async def test_greeting_falls_back_on_profile_error(service, fake_client, identity):
    fake_client.fail_select["profiles"] = BackendError("permission denied", code="42501")
    _add_article(fake_client, "draft")

    view = await service.load(identity)

    assert view.greeting_name == "ada@example.com"
    assert view.article_count == 1


@pytest.mark.asyncio
async def test_blank_full_name_falls_back(service, fake_client, identity):
    fake_client.add_row("profiles", user_id="user-1", full_name="")

    view = await service.load(identity)

    assert view.greeting_name == "ada@example.com"


@pytest.mark.asyncio
async def test_only_own_articles_newest_first(service, fake_client, identity):
    _add_article(fake_client, "draft")
    _add_article(fake_client, "approved", likes_count=3, views_count=10)
    _add_article(fake_client, "approved", author_id="someone-else")
    _add_article(fake_client, "pending", likes_count=5, comments_count=2)

    view = await service.load(identity)

    assert view.article_count == 3
    assert all(a.author_id == "user-1" for a in view.articles)
    assert [a.status for a in view.articles] == [
        ArticleStatus.PENDING,
        ArticleStatus.APPROVED,
        ArticleStatus.DRAFT,
    ]
    assert view.totals.likes == 8
    assert view.totals.views == 10
    assert view.totals.comments == 2


@pytest.mark.asyncio
async def test_tabs(service, fake_client, identity):
    for status in ("draft", "draft", "pending", "approved", "rejected", "hidden"):
        _add_article(fake_client, status)

    view = await service.load(identity)

    assert view.tabs() == [ALL_TAB, "draft", "pending", "approved", "rejected", "hidden"]
    assert len(view.tab(ALL_TAB)) == 6
    assert len(view.tab("draft")) == 2
    assert sum(len(view.tab(status.value)) for status in ArticleStatus) == 6


@pytest.mark.asyncio
async def test_articles_error_gives_error_view(service, fake_client, identity):
    fake_client.add_row("profiles", user_id="user-1", full_name="Ada")
    fake_client.fail_select["blogs"] = BackendError("JWT expired", code="PGRST301")

    view = await service.load(identity)

    assert view.error == "JWT expired"
    assert view.articles == []
    assert view.is_empty is False
    assert view.greeting_name == "Ada"


@pytest.mark.asyncio
async def test_dashboard_is_cached(service, fake_client, identity):
    _add_article(fake_client, "draft")

    await service.load(identity)
    await service.load(identity)

    assert len(fake_client.selects) == 2
