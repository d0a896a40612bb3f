"""
Общие фикстуры: in-memory клиент данных вместо Supabase.
"""

from datetime import datetime, timedelta, timezone
from typing import Any, Dict, List, Optional, Sequence

import pytest

from blogify.application.cache.query_cache import QueryCache
from blogify.domain.entities.article import Article
from blogify.domain.entities.identity import Identity
from blogify.domain.value_objects.article_status import ArticleStatus
from blogify.infrastructure.backend.data_access import IDataAccessClient, Ordering, Row, validate_limit
from blogify.shared.exceptions.infrastructure_exceptions import BackendError, RowNotFoundError

BASE_TIME = datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc)


class FakeDataClient(IDataAccessClient):
    """
    Таблицы в памяти с семантикой PostgREST:
    фильтры по равенству, сортировка по нескольким ключам, limit, колонки.
    """

    def __init__(self):
        self.tables: Dict[str, List[Row]] = {}
        self.inserts: List[tuple] = []
        self.selects: List[tuple] = []
        self.fail_insert: Optional[BackendError] = None
        self.fail_select: Dict[str, BackendError] = {}
        self._seq = 0

    def add_row(self, table: str, **row: Any) -> Row:
        self._seq += 1
        row.setdefault("id", f"{self._seq:04d}")
        row.setdefault("created_at", (BASE_TIME + timedelta(minutes=self._seq)).isoformat())
        for counter in ("likes_count", "comments_count", "views_count"):
            row.setdefault(counter, 0)
        self.tables.setdefault(table, []).append(row)
        return row

    async def insert(self, table: str, record: Row) -> Row:
        self.inserts.append((table, dict(record)))
        if self.fail_insert is not None:
            raise self.fail_insert
        return dict(self.add_row(table, **dict(record)))

    async def select(
        self,
        table: str,
        filters: Optional[Dict[str, Any]] = None,
        order: Sequence[Ordering] = (),
        limit: Optional[int] = None,
        columns: Sequence[str] = ("*",),
    ) -> List[Row]:
        validate_limit(limit)
        self.selects.append((table, dict(filters or {}), tuple(order), limit))
        if table in self.fail_select:
            raise self.fail_select[table]

        rows = [
            dict(row) for row in self.tables.get(table, [])
            if all(row.get(k) == v for k, v in (filters or {}).items())
        ]
        for o in reversed(list(order)):
            rows.sort(key=lambda r: r.get(o.field), reverse=o.descending)
        if limit is not None:
            rows = rows[:limit]
        if list(columns) != ["*"]:
            rows = [{c: row.get(c) for c in columns} for row in rows]
        return rows

    async def select_single(
        self,
        table: str,
        filters: Dict[str, Any],
        columns: Sequence[str] = ("*",),
    ) -> Row:
        rows = await self.select(table, filters, columns=columns)
        if not rows:
            raise RowNotFoundError()
        return rows[0]


@pytest.fixture
def fake_client() -> FakeDataClient:
    return FakeDataClient()


@pytest.fixture
def cache() -> QueryCache:
    return QueryCache(stale_seconds=60)


@pytest.fixture
def identity() -> Identity:
    return Identity(id="user-1", email="ada@example.com")


def make_article(
    status: ArticleStatus = ArticleStatus.APPROVED,
    article_id: Optional[str] = None,
    **overrides: Any,
) -> Article:
    """Построить статью для тестов."""
    fields = dict(
        id=article_id,
        author_id="user-1",
        title=f"Article {article_id or ''}".strip(),
        body="Body",
        status=status,
    )
    fields.update(overrides)
    return Article(**fields)


@pytest.fixture
def article_factory():
    return make_article
