"""
Infrastructure Exceptions

Исключения инфраструктурного слоя.
"""

from typing import Optional


# PostgREST: single-row запрос не вернул ни одной строки
ROW_NOT_FOUND_CODE = "PGRST116"


class InfrastructureException(Exception):
    """Базовое исключение инфраструктуры."""
    pass


class BackendError(InfrastructureException):
    """
    Ошибка, полученная от бэкенда (PostgREST / Postgres / GoTrue).

    message показывается пользователю как есть.
    """

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        details: Optional[str] = None
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.details = details

    def __repr__(self) -> str:
        return f"{type(self).__name__}(message={self.message!r}, code={self.code!r})"


class RowNotFoundError(BackendError):
    """Single-row выборка не нашла строку."""

    def __init__(self, message: str = "The result contains 0 rows", details: Optional[str] = None):
        super().__init__(message, code=ROW_NOT_FOUND_CODE, details=details)


class CacheError(InfrastructureException):
    """Ошибка работы с кэшем."""
    pass
