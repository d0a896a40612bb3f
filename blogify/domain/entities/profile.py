"""
Доменная сущность: Профиль пользователя.

Для ядра профиль только читается — нужен для приветствия в кабинете.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Profile:
    user_id: str
    full_name: Optional[str] = None

    def display_name(self, fallback: str) -> str:
        """Имя для приветствия; fallback если имя не заполнено."""
        if self.full_name and self.full_name.strip():
            return self.full_name
        return fallback
