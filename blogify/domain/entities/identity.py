"""
Текущий пользователь, как его видит провайдер аутентификации.
"""

from dataclasses import dataclass
from typing import Optional

from blogify.shared.exceptions.domain_exceptions import NotAuthenticatedError


@dataclass(frozen=True)
class Identity:
    """Аутентифицированный пользователь."""

    id: str
    email: str = ""

    @property
    def handle(self) -> str:
        """Сырой идентификатор для показа, когда профиля нет."""
        return self.email or self.id


@dataclass(frozen=True)
class AuthState:
    """
    Состояние сессии.

    identity=None и loading=False — пользователь не вошёл.
    """

    identity: Optional[Identity] = None
    loading: bool = False

    @property
    def is_authenticated(self) -> bool:
        return self.identity is not None

    @property
    def should_redirect(self) -> bool:
        """Уводить ли пользователя из защищённого раздела."""
        return self.identity is None and not self.loading

    def require_identity(self) -> Identity:
        """
        Получить пользователя для защищённого раздела.

        Исключения:
            NotAuthenticatedError: сессии нет (и она не загружается)
        """
        if self.identity is None:
            if self.loading:
                raise NotAuthenticatedError("Session is still loading")
            raise NotAuthenticatedError("Sign in required")
        return self.identity
