"""
Command Handler для статей.
"""

from typing import Optional

from blogify.application.cache.query_cache import QueryCache
from blogify.application.commands.create_article_command import CreateArticleCommand
from blogify.application.queries.article_queries import affected_keys
from blogify.domain.entities.article import Article
from blogify.domain.repositories.article_repository import IArticleRepository
from blogify.domain.services.excerpt import resolve_excerpt
from blogify.domain.value_objects.article_status import ArticleStatus
from blogify.shared.exceptions.domain_exceptions import (
    BusinessRuleViolation,
    DomainValidationError,
)


REQUIRED_FIELDS_MESSAGE = "Title and content are required."


class ArticleCommandHandler:
    """Handler для команд работы со статьями."""

    def __init__(self, repository: IArticleRepository, cache: Optional[QueryCache] = None):
        self.repository = repository
        self.cache = cache

    @staticmethod
    def validate(command: CreateArticleCommand) -> None:
        """
        Проверки до обращения к бэкенду.

        Raises:
            DomainValidationError: пустой заголовок или текст
            BusinessRuleViolation: статус не черновик и не на модерацию
        """
        if not command.title.strip() or not command.body.strip():
            raise DomainValidationError(REQUIRED_FIELDS_MESSAGE)

        status = ArticleStatus(command.status)
        if not status.is_initial():
            raise BusinessRuleViolation(
                f"New articles can only be saved as draft or pending, not {status.value}"
            )

    async def handle_create_article(self, command: CreateArticleCommand) -> Article:
        """
        Обработка команды создания статьи.

        Args:
            command: Команда создания

        Returns:
            Созданная статья

        Raises:
            DomainValidationError, BusinessRuleViolation: до вставки
            BackendError: бэкенд отклонил вставку
        """
        self.validate(command)

        article = Article(
            author_id=command.author_id,
            title=command.title,
            body=command.body,
            excerpt=resolve_excerpt(command.excerpt, command.body),
            featured_image=command.featured_image or None,
            tags=list(command.tags),
            status=command.status,
        )

        saved = await self.repository.save(article)

        if self.cache is not None:
            self.cache.invalidate_keys(affected_keys(saved))
        return saved
