# -*- coding: utf-8 -*-
"""
PostgREST адаптер IDataAccessClient.

Фильтры переводятся в eq.-операторы, сортировка — в параметр order,
single-row выборка — через заголовок vnd.pgrst.object.
"""

from enum import Enum
from typing import Any, Dict, List, Optional, Sequence

from blogify.infrastructure.backend.data_access import (
    IDataAccessClient,
    Ordering,
    Row,
    validate_limit,
)
from blogify.infrastructure.backend.supabase_http import SupabaseHttpClient

SINGLE_OBJECT_MEDIA_TYPE = "application/vnd.pgrst.object+json"


def _format_value(value: Any) -> str:
    if isinstance(value, Enum):
        value = value.value
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def build_query_params(
    filters: Optional[Dict[str, Any]] = None,
    order: Sequence[Ordering] = (),
    limit: Optional[int] = None,
    columns: Sequence[str] = ("*",),
) -> Dict[str, str]:
    """Параметры строки запроса PostgREST."""
    validate_limit(limit)

    params = {"select": ",".join(columns)}
    for field, value in (filters or {}).items():
        params[field] = "is.null" if value is None else f"eq.{_format_value(value)}"
    if order:
        params["order"] = ",".join(
            f"{o.field}.{'desc' if o.descending else 'asc'}" for o in order
        )
    if limit is not None:
        params["limit"] = str(limit)
    return params


class SupabaseRestClient(SupabaseHttpClient, IDataAccessClient):
    """Клиент таблиц Supabase через PostgREST."""

    def _table_url(self, table: str) -> str:
        return f"{self.settings.get_rest_url()}/{table}"

    async def insert(self, table: str, record: Row) -> Row:
        rows = await self._request(
            "POST",
            self._table_url(table),
            json=record,
            headers={"Prefer": "return=representation"},
        )
        if isinstance(rows, list) and rows:
            return rows[0]
        if isinstance(rows, dict):
            return rows
        return dict(record)

    async def select(
        self,
        table: str,
        filters: Optional[Dict[str, Any]] = None,
        order: Sequence[Ordering] = (),
        limit: Optional[int] = None,
        columns: Sequence[str] = ("*",),
    ) -> List[Row]:
        params = build_query_params(filters, order, limit, columns)
        rows = await self._request("GET", self._table_url(table), params=params)
        return list(rows or [])

    async def select_single(
        self,
        table: str,
        filters: Dict[str, Any],
        columns: Sequence[str] = ("*",),
    ) -> Row:
        params = build_query_params(filters, columns=columns)
        return await self._request(
            "GET",
            self._table_url(table),
            params=params,
            headers={"Accept": SINGLE_OBJECT_MEDIA_TYPE},
        )
