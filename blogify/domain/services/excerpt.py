"""
Правило синтеза анонса (excerpt) из текста статьи.
"""

from typing import Optional

EXCERPT_LENGTH = 200
EXCERPT_MARKER = "..."


def derive_excerpt(body: str) -> str:
    """Первые EXCERPT_LENGTH символов текста + маркер."""
    return body[:EXCERPT_LENGTH] + EXCERPT_MARKER


def resolve_excerpt(excerpt: Optional[str], body: str) -> str:
    """
    Анонс для сохранения.

    Авторский анонс сохраняется как есть, пустой заменяется синтезированным.
    """
    if excerpt:
        return excerpt
    return derive_excerpt(body)
