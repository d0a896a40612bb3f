"""
Порт клиента доступа к данным бэкенда.

Бэкенд (схема, выполнение запросов, RLS) внешний — здесь только форма вызовов.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Sequence

Row = Dict[str, Any]


@dataclass(frozen=True)
class Ordering:
    """Ключ сортировки."""

    field: str
    descending: bool = False

    @classmethod
    def desc(cls, field: str) -> "Ordering":
        return cls(field, descending=True)

    @classmethod
    def asc(cls, field: str) -> "Ordering":
        return cls(field, descending=False)


class IDataAccessClient(ABC):
    """
    Типизированный insert/select по таблицам бэкенда.

    Ошибки бэкенда поднимаются как BackendError; отсутствие строки
    в select_single — как RowNotFoundError.
    """

    @abstractmethod
    async def insert(self, table: str, record: Row) -> Row:
        """Вставить одну запись и вернуть её представление из бэкенда."""
        pass

    @abstractmethod
    async def select(
        self,
        table: str,
        filters: Optional[Dict[str, Any]] = None,
        order: Sequence[Ordering] = (),
        limit: Optional[int] = None,
        columns: Sequence[str] = ("*",),
    ) -> List[Row]:
        """
        Выборка строк.

        Args:
            table: Таблица
            filters: Условия равенства поле -> значение
            order: Ключи сортировки, первичный первым
            limit: Положительный лимит или None
            columns: Выбираемые колонки
        """
        pass

    @abstractmethod
    async def select_single(
        self,
        table: str,
        filters: Dict[str, Any],
        columns: Sequence[str] = ("*",),
    ) -> Row:
        """Ровно одна строка; RowNotFoundError если строк нет."""
        pass


def validate_limit(limit: Optional[int]) -> None:
    """Лимит должен быть положительным целым."""
    if limit is not None and (not isinstance(limit, int) or limit <= 0):
        raise ValueError(f"limit must be a positive integer, got {limit!r}")
