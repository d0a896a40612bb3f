# -*- coding: utf-8 -*-
"""
SQLAlchemy адаптер IDataAccessClient.

Тот же контракт, что у PostgREST клиента, но поверх прямого подключения
к Postgres. Ошибки драйвера превращаются в BackendError.

AsyncSession нельзя использовать из параллельных задач, поэтому запросы
одного клиента выполняются по очереди.
"""

import asyncio
import logging
import uuid
from datetime import datetime
from typing import Any, Dict, List, Optional, Sequence

from sqlalchemy import insert, select
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from blogify.infrastructure.backend.data_access import (
    IDataAccessClient,
    Ordering,
    Row,
    validate_limit,
)
from blogify.infrastructure.persistence.models import Base
from blogify.shared.exceptions.infrastructure_exceptions import BackendError, RowNotFoundError

logger = logging.getLogger(__name__)


def _to_json_value(value: Any) -> Any:
    """Значения колонок в тот же вид, что отдаёт PostgREST."""
    if isinstance(value, uuid.UUID):
        return str(value)
    if isinstance(value, datetime):
        return value.isoformat()
    return value


def _coerce(column, value: Any) -> Any:
    """Строковые UUID в uuid.UUID для колонок типа UUID."""
    if isinstance(column.type, UUID) and isinstance(value, str):
        try:
            return uuid.UUID(value)
        except ValueError as e:
            raise BackendError(f'invalid input syntax for type uuid: "{value}"', code="22P02") from e
    return value


class SqlDataAccessClient(IDataAccessClient):
    """Клиент таблиц через AsyncSession."""

    def __init__(self, session: AsyncSession):
        self.session = session
        self._lock = asyncio.Lock()

    def _table(self, table: str):
        table_obj = Base.metadata.tables.get(table)
        if table_obj is None:
            raise BackendError(f'relation "{table}" does not exist', code="42P01")
        return table_obj

    @staticmethod
    def _column(table_obj, name: str):
        if name not in table_obj.c:
            raise BackendError(f"column {table_obj.name}.{name} does not exist", code="42703")
        return table_obj.c[name]

    def _where(self, table_obj, filters: Optional[Dict[str, Any]]):
        clauses = []
        for field, value in (filters or {}).items():
            column = self._column(table_obj, field)
            clauses.append(column.is_(None) if value is None else column == _coerce(column, value))
        return clauses

    def _columns(self, table_obj, columns: Sequence[str]):
        if list(columns) == ["*"]:
            return [table_obj]
        return [self._column(table_obj, name) for name in columns]

    def _values(self, table_obj, record: Row) -> Row:
        values = {}
        for field, value in record.items():
            if field not in table_obj.c:
                raise BackendError(f"Could not find the '{field}' column of '{table_obj.name}'", code="PGRST204")
            values[field] = _coerce(table_obj.c[field], value)
        return values

    @staticmethod
    def _row(mapping) -> Row:
        return {key: _to_json_value(value) for key, value in mapping.items()}

    async def insert(self, table: str, record: Row) -> Row:
        table_obj = self._table(table)
        statement = insert(table_obj).values(**self._values(table_obj, record)).returning(table_obj)
        async with self._lock:
            try:
                result = await self.session.execute(statement)
                row = result.mappings().one()
                await self.session.commit()
            except SQLAlchemyError as e:
                await self.session.rollback()
                logger.warning(f"Insert into {table} failed: {e}")
                raise BackendError(str(getattr(e, "orig", None) or e)) from e
        return self._row(row)

    async def select(
        self,
        table: str,
        filters: Optional[Dict[str, Any]] = None,
        order: Sequence[Ordering] = (),
        limit: Optional[int] = None,
        columns: Sequence[str] = ("*",),
    ) -> List[Row]:
        validate_limit(limit)
        table_obj = self._table(table)

        query = select(*self._columns(table_obj, columns)).where(*self._where(table_obj, filters))
        for o in order:
            column = self._column(table_obj, o.field)
            query = query.order_by(column.desc() if o.descending else column.asc())
        if limit is not None:
            query = query.limit(limit)

        async with self._lock:
            try:
                result = await self.session.execute(query)
                mappings = result.mappings().all()
            except SQLAlchemyError as e:
                logger.warning(f"Select from {table} failed: {e}")
                raise BackendError(str(getattr(e, "orig", None) or e)) from e
        return [self._row(m) for m in mappings]

    async def select_single(
        self,
        table: str,
        filters: Dict[str, Any],
        columns: Sequence[str] = ("*",),
    ) -> Row:
        rows = await self.select(table, filters, columns=columns, limit=2)
        if not rows:
            raise RowNotFoundError()
        if len(rows) > 1:
            raise BackendError("JSON object requested, multiple rows returned")
        return rows[0]
