"""
Query cache module — кэш выборок с явной инвалидацией.
"""

from blogify.application.cache.query_cache import (
    QueryCache,
    QueryKey,
    QueryState,
    QueryStatus,
    get_query_cache,
    reset_query_cache,
)

__all__ = [
    'QueryCache',
    'QueryKey',
    'QueryState',
    'QueryStatus',
    'get_query_cache',
    'reset_query_cache',
]
