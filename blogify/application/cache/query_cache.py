# -*- coding: utf-8 -*-
"""
Query Cache — кэш результатов выборок по семантическому ключу.

- Один ключ = одна выборка: параллельные читатели ждут общий запрос
- Для каждого ключа хранится состояние: loading / success / error
- Мутации явно инвалидируют затронутые ключи (invalidate), запись удаляется
- Записи старше stale_seconds удаляются при следующем fetch
- Ошибка не кэшируется как данные и не повторяется автоматически:
  следующий fetch по ключу запросит бэкенд заново
"""

import asyncio
import logging
import time
from dataclasses import dataclass
from enum import Enum
from typing import Any, Awaitable, Callable, Dict, Iterable, List, Optional, Tuple

from blogify.shared.exceptions.infrastructure_exceptions import CacheError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class QueryKey:
    """Ключ кэша: тип сущности + параметры выборки."""

    entity: str
    params: Tuple[Tuple[str, Any], ...] = ()

    @classmethod
    def of(cls, entity: str, **params: Any) -> "QueryKey":
        return cls(entity, tuple(sorted(params.items())))

    def matches(self, entity: str, **params: Any) -> bool:
        """Совпадает ли ключ с сущностью и (частичным) набором параметров."""
        if self.entity != entity:
            return False
        own = dict(self.params)
        return all(name in own and own[name] == value for name, value in params.items())

    def __str__(self) -> str:
        args = ",".join(f"{k}={v}" for k, v in self.params)
        return f"{self.entity}({args})"


class QueryStatus(str, Enum):
    """Состояние выборки по ключу."""

    IDLE = "idle"
    LOADING = "loading"
    SUCCESS = "success"
    ERROR = "error"


@dataclass
class QueryState:
    """Запись кэша."""

    status: QueryStatus = QueryStatus.IDLE
    data: Any = None
    error: Optional[BaseException] = None
    updated_at: float = 0.0

    @property
    def is_loading(self) -> bool:
        return self.status is QueryStatus.LOADING


class QueryCache:
    """
    Процессный кэш выборок.

    Использование:
        cache = get_query_cache()
        articles = await cache.fetch(key, lambda: repository.find_by_author(user_id))

        # после вставки
        cache.invalidate_keys(affected_keys(article))
    """

    def __init__(self, stale_seconds: float = 30.0, clock: Callable[[], float] = time.monotonic):
        if stale_seconds < 0:
            raise CacheError("stale_seconds must be non-negative")
        self.stale_seconds = stale_seconds
        self._clock = clock
        self._states: Dict[QueryKey, QueryState] = {}
        self._inflight: Dict[QueryKey, "asyncio.Future[Any]"] = {}

    def state(self, key: QueryKey) -> QueryState:
        """Текущее состояние ключа (IDLE если ключ не запрашивался)."""
        return self._states.get(key) or QueryState()

    def keys(self) -> List[QueryKey]:
        return list(self._states)

    def _is_fresh(self, state: QueryState) -> bool:
        if state.status is not QueryStatus.SUCCESS:
            return False
        return self._clock() - state.updated_at < self.stale_seconds

    async def fetch(self, key: QueryKey, fetcher: Callable[[], Awaitable[Any]]) -> Any:
        """
        Получить данные по ключу.

        Свежие данные отдаются из кэша; если запрос по ключу уже идёт,
        вызывающий ждёт его результат; иначе вызывается fetcher.

        Raises:
            Исключение fetcher-а (состояние ключа становится ERROR)
        """
        self._prune()
        state = self._states.get(key)
        if state is not None and self._is_fresh(state):
            return state.data

        inflight = self._inflight.get(key)
        if inflight is not None:
            return await asyncio.shield(inflight)

        logger.debug(f"Cache miss: {key}")
        future = asyncio.ensure_future(fetcher())
        self._inflight[key] = future

        state = self._states.setdefault(key, QueryState())
        state.status = QueryStatus.LOADING
        state.error = None
        future.add_done_callback(lambda f: self._settle(key, state, f))
        return await asyncio.shield(future)

    def _settle(self, key: QueryKey, state: QueryState, future: "asyncio.Future[Any]") -> None:
        """Записать итог запроса в состояние ключа."""
        if self._inflight.get(key) is future:
            del self._inflight[key]
        current = self._states.get(key) is state

        if future.cancelled():
            if current:
                state.status = QueryStatus.IDLE
            return

        error = future.exception()
        if error is not None:
            logger.warning(f"Query {key} failed: {error}")
            if current:
                state.status = QueryStatus.ERROR
                state.error = error
                state.updated_at = self._clock()
            return

        if current:
            state.status = QueryStatus.SUCCESS
            state.data = future.result()
            state.updated_at = self._clock()

    def _prune(self) -> None:
        """Удалить записи старше stale_seconds (кроме идущих запросов)."""
        now = self._clock()
        expired = [
            key for key, state in self._states.items()
            if key not in self._inflight and now - state.updated_at >= self.stale_seconds
        ]
        for key in expired:
            del self._states[key]

    def invalidate(self, entity: str, **params: Any) -> int:
        """
        Удалить из кэша все ключи сущности с данными параметрами.

        Идущий запрос по такому ключу отвязывается от кэша: его результат
        получат ожидающие, но в кэш он не попадёт.

        Возвращает:
            Количество удалённых ключей
        """
        affected = [key for key in self._states if key.matches(entity, **params)]
        for key in affected:
            del self._states[key]
            self._inflight.pop(key, None)
        if affected:
            logger.debug(f"Invalidated {len(affected)} key(s) for {entity} {params}")
        return len(affected)

    def invalidate_keys(self, keys: Iterable[QueryKey]) -> int:
        """Инвалидировать перечисленные ключи."""
        return sum(self.invalidate(key.entity, **dict(key.params)) for key in keys)

    def clear(self) -> None:
        """Очистить кэш (идущие запросы не отменяются)."""
        self._states.clear()
        self._inflight.clear()


_query_cache: Optional[QueryCache] = None


def get_query_cache() -> QueryCache:
    """Процессный экземпляр кэша."""
    global _query_cache
    if _query_cache is None:
        from blogify.infrastructure.config.settings import get_settings

        _query_cache = QueryCache(stale_seconds=get_settings().query_stale_seconds)
    return _query_cache


def reset_query_cache() -> None:
    """Сбросить процессный кэш (для тестов)."""
    global _query_cache
    _query_cache = None
