"""
Value Object: TagSet

Упорядоченный набор уникальных тегов статьи.
"""

from typing import Iterable, Iterator, List, Optional


class TagSet:
    """
    Теги в порядке добавления.

    Инварианты:
    - нет дубликатов (сравнение точное, с учётом регистра)
    - нет пустых строк и строк из пробелов
    """

    def __init__(self, tags: Optional[Iterable[str]] = None):
        self._tags: List[str] = []
        for tag in tags or ():
            self.add(tag)

    def add(self, candidate: str) -> bool:
        """
        Добавить тег в конец.

        Возвращает:
            True если тег добавлен, False если пустой или уже есть
        """
        tag = (candidate or "").strip()
        if not tag or tag in self._tags:
            return False
        self._tags.append(tag)
        return True

    def remove(self, tag: str) -> bool:
        """Удалить тег (точное совпадение). False если тега нет."""
        if tag not in self._tags:
            return False
        self._tags.remove(tag)
        return True

    def as_list(self) -> List[str]:
        return list(self._tags)

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._tags))

    def __len__(self) -> int:
        return len(self._tags)

    def __contains__(self, tag: object) -> bool:
        return tag in self._tags

    def __eq__(self, other: object) -> bool:
        if isinstance(other, TagSet):
            return self._tags == other._tags
        return NotImplemented

    def __repr__(self) -> str:
        return f"TagSet({self._tags!r})"
