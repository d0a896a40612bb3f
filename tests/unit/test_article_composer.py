"""
Unit tests для ArticleComposer.
"""

import asyncio

import pytest

from blogify.application.cache.query_cache import QueryKey
from blogify.application.composer.article_composer import ArticleComposer, ArticleForm
from blogify.application.handlers.article_command_handler import ArticleCommandHandler
from blogify.application.queries.article_queries import UserArticlesQuery
from blogify.domain.value_objects.article_status import ArticleStatus
from blogify.infrastructure.persistence.article_repository_impl import ArticleRepositoryImpl
from blogify.shared.exceptions.domain_exceptions import (
    BusinessRuleViolation,
    DomainValidationError,
    SaveInProgressError,
)
from blogify.shared.exceptions.infrastructure_exceptions import BackendError


@pytest.fixture
def composer(fake_client, cache, identity):
    handler = ArticleCommandHandler(ArticleRepositoryImpl(fake_client), cache)
    composer = ArticleComposer(handler, identity)
    composer.form = ArticleForm(title="Hello", body="# Markdown body")
    return composer


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "status,message",
    [
        (ArticleStatus.DRAFT, "Article saved as draft"),
        (ArticleStatus.PENDING, "Article submitted for review"),
    ],
)
async def test_save_issues_one_insert(composer, fake_client, status, message):
    outcome = await composer.save(status)

    assert len(fake_client.inserts) == 1
    table, record = fake_client.inserts[0]
    assert table == "blogs"
    assert record["status"] == status.value
    assert record["author_id"] == "user-1"
    assert record["content"] == "# Markdown body"

    assert outcome.message == message
    assert outcome.redirect_to == "/dashboard"
    assert outcome.article.id is not None
    assert outcome.article.status is status


@pytest.mark.asyncio
@pytest.mark.parametrize("title,body", [("", "Body"), ("Title", ""), ("   ", "Body"), ("Title", " \n ")])
async def test_blank_fields_block_save(composer, fake_client, title, body):
    composer.form.title = title
    composer.form.body = body

    with pytest.raises(DomainValidationError) as exc_info:
        await composer.save(ArticleStatus.DRAFT)

    assert str(exc_info.value) == "Title and content are required."
    assert fake_client.inserts == []


@pytest.mark.asyncio
@pytest.mark.parametrize("status", ["approved", "rejected", "hidden", "published"])
async def test_only_initial_statuses(composer, fake_client, status):
    with pytest.raises(BusinessRuleViolation):
        await composer.save(status)

    assert fake_client.inserts == []


@pytest.mark.asyncio
async def test_excerpt_derived_from_body(composer, fake_client):
    composer.form.body = "x" * 500

    await composer.save(ArticleStatus.DRAFT)

    record = fake_client.inserts[0][1]
    assert record["excerpt"] == "x" * 200 + "..."


@pytest.mark.asyncio
async def test_authored_excerpt_kept(composer, fake_client):
    composer.form.excerpt = "Short summary"

    await composer.save(ArticleStatus.DRAFT)

    assert fake_client.inserts[0][1]["excerpt"] == "Short summary"


@pytest.mark.asyncio
async def test_empty_optionals_stored_as_null(composer, fake_client):
    await composer.save(ArticleStatus.DRAFT)

    record = fake_client.inserts[0][1]
    assert record["tags"] is None
    assert record["featured_image"] is None


@pytest.mark.asyncio
async def test_tags_saved_in_order(composer, fake_client):
    composer.add_tag(" python ")
    composer.add_tag("asyncio")
    composer.add_tag("python")
    composer.add_tag("")
    composer.remove_tag("missing")

    outcome = await composer.save(ArticleStatus.PENDING)

    assert fake_client.inserts[0][1]["tags"] == ["python", "asyncio"]
    assert outcome.article.tags == ["python", "asyncio"]


@pytest.mark.asyncio
async def test_backend_error_surfaces_verbatim(composer, fake_client):
    fake_client.fail_insert = BackendError(
        'new row violates row-level security policy for table "blogs"', code="42501"
    )
    composer.add_tag("rls")

    with pytest.raises(BackendError) as exc_info:
        await composer.save(ArticleStatus.PENDING)

    assert exc_info.value.message == 'new row violates row-level security policy for table "blogs"'
    assert len(fake_client.inserts) == 1
    assert composer.form == ArticleForm(title="Hello", body="# Markdown body")
    assert composer.tags == ["rls"]
    assert composer.is_saving is False


@pytest.mark.asyncio
async def test_second_submit_while_saving(composer, fake_client):
    release = asyncio.Event()
    original_insert = fake_client.insert

    async def slow_insert(table, record):
        await release.wait()
        return await original_insert(table, record)

    fake_client.insert = slow_insert

    task = composer.submit(ArticleStatus.DRAFT)
    await asyncio.sleep(0)
    assert composer.is_saving

    with pytest.raises(SaveInProgressError):
        composer.submit(ArticleStatus.DRAFT)

    release.set()
    await task
    assert len(fake_client.inserts) == 1
    assert composer.is_saving is False


@pytest.mark.asyncio
async def test_cancel_in_flight_save(composer, fake_client):
    release = asyncio.Event()

    async def never(table, record):
        await release.wait()

    fake_client.insert = never

    task = composer.submit(ArticleStatus.DRAFT)
    await asyncio.sleep(0)
    assert composer.cancel() is True

    with pytest.raises(asyncio.CancelledError):
        await task
    assert composer.is_saving is False


@pytest.mark.asyncio
async def test_save_invalidates_author_articles(composer, cache):
    key = UserArticlesQuery("user-1").key
    await cache.fetch(key, _empty)
    latest = QueryKey.of("articles", listing="latest")
    await cache.fetch(latest, _empty)

    await composer.save(ArticleStatus.DRAFT)

    assert key not in cache.keys()
    assert latest in cache.keys()


async def _empty():
    return []
