"""
Value Object: ArticleStatus

Статус модерации статьи.
"""

from enum import Enum
from typing import Tuple


class ArticleStatus(str, Enum):
    """Статусы жизненного цикла статьи."""

    DRAFT = "draft"                  # Черновик автора
    PENDING = "pending"              # Отправлена на модерацию
    APPROVED = "approved"            # Опубликована
    REJECTED = "rejected"            # Отклонена модератором
    HIDDEN = "hidden"                # Скрыта модератором

    @classmethod
    def author_selectable(cls) -> Tuple["ArticleStatus", ...]:
        """Статусы, в которых автор может создать статью."""
        return (cls.DRAFT, cls.PENDING)

    def is_initial(self) -> bool:
        """Может ли статья быть создана в этом статусе."""
        return self in self.author_selectable()

    def is_public(self) -> bool:
        """Видна ли статья в публичных лентах."""
        return self is ArticleStatus.APPROVED

    def can_transition_to(self, new_status: 'ArticleStatus') -> bool:
        """
        Проверка возможности перехода в новый статус.

        Переходы выполняет внешняя модерация, ядро их только отображает:
        - DRAFT -> PENDING
        - PENDING -> APPROVED, REJECTED
        - APPROVED -> HIDDEN
        - HIDDEN -> APPROVED
        - REJECTED -> PENDING (повторная отправка)
        """
        transitions = {
            ArticleStatus.DRAFT: [ArticleStatus.PENDING],
            ArticleStatus.PENDING: [ArticleStatus.APPROVED, ArticleStatus.REJECTED],
            ArticleStatus.APPROVED: [ArticleStatus.HIDDEN],
            ArticleStatus.HIDDEN: [ArticleStatus.APPROVED],
            ArticleStatus.REJECTED: [ArticleStatus.PENDING],
        }

        allowed = transitions.get(self, [])
        return new_status in allowed

    @property
    def tab_label(self) -> str:
        """Подпись вкладки в кабинете."""
        labels = {
            ArticleStatus.DRAFT: "Drafts",
            ArticleStatus.PENDING: "Pending",
            ArticleStatus.APPROVED: "Published",
            ArticleStatus.REJECTED: "Rejected",
            ArticleStatus.HIDDEN: "Hidden",
        }
        return labels[self]

    @property
    def badge_color(self) -> str:
        """Цвет бейджа статуса."""
        colors = {
            ArticleStatus.DRAFT: "blue",
            ArticleStatus.PENDING: "orange",
            ArticleStatus.APPROVED: "green",
            ArticleStatus.REJECTED: "red",
            ArticleStatus.HIDDEN: "gray",
        }
        return colors[self]
