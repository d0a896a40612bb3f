# -*- coding: utf-8 -*-
"""
Article Composer — форма новой статьи.

Собирает поля локально, проверяет минимально и сохраняет статью одной
вставкой: черновиком (draft) или на модерацию (pending).
"""

import asyncio
import logging
from dataclasses import dataclass
from typing import Any, List, Optional, Union

from blogify.application.commands.create_article_command import CreateArticleCommand
from blogify.application.handlers.article_command_handler import ArticleCommandHandler
from blogify.domain.entities.article import Article
from blogify.domain.entities.identity import Identity
from blogify.domain.value_objects.article_status import ArticleStatus
from blogify.domain.value_objects.tag_set import TagSet
from blogify.shared.concurrency.exclusive_task import ExclusiveTask
from blogify.shared.exceptions.domain_exceptions import BusinessRuleViolation
from blogify.shared.exceptions.infrastructure_exceptions import BackendError

logger = logging.getLogger(__name__)

DASHBOARD_PATH = "/dashboard"


@dataclass
class ArticleForm:
    """Поля формы (как их ввёл пользователь)."""

    title: str = ""
    excerpt: str = ""
    body: str = ""
    featured_image: str = ""


@dataclass(frozen=True)
class SaveOutcome:
    """Результат сохранения: статья, сообщение и куда перейти."""

    article: Article
    message: str
    redirect_to: str = DASHBOARD_PATH


def success_message(status: ArticleStatus) -> str:
    messages = {
        ArticleStatus.DRAFT: "Article saved as draft",
        ArticleStatus.PENDING: "Article submitted for review",
    }
    return messages[status]


class ArticleComposer:
    """
    Состояние редактора и сохранение.

    Использование:
        composer = ArticleComposer(handler, identity)
        composer.form.title = "Hello"
        composer.form.body = "# Markdown"
        composer.add_tag("python")
        outcome = await composer.save(ArticleStatus.PENDING)

    При ошибке бэкенда форма остаётся как есть, повтора нет.
    """

    def __init__(
        self,
        handler: ArticleCommandHandler,
        identity: Identity,
        form: Optional[ArticleForm] = None,
        tags: Optional[TagSet] = None,
    ):
        self.handler = handler
        self.identity = identity
        self.form = form or ArticleForm()
        self.tag_set = tags if tags is not None else TagSet()
        self._save_task = ExclusiveTask("save")

    # =========================================================================
    # Теги
    # =========================================================================

    def add_tag(self, candidate: str) -> bool:
        """Добавить тег (trim; пустые и повторы игнорируются)."""
        return self.tag_set.add(candidate)

    def remove_tag(self, tag: str) -> bool:
        """Удалить тег; отсутствующий игнорируется."""
        return self.tag_set.remove(tag)

    @property
    def tags(self) -> List[str]:
        return self.tag_set.as_list()

    # =========================================================================
    # Сохранение
    # =========================================================================

    @property
    def is_saving(self) -> bool:
        return self._save_task.is_running

    def build_command(self, status: Union[ArticleStatus, str]) -> CreateArticleCommand:
        """Команда создания из текущего состояния формы."""
        try:
            status = ArticleStatus(status)
        except ValueError as e:
            raise BusinessRuleViolation(f"Unknown article status: {status}") from e

        return CreateArticleCommand(
            author_id=self.identity.id,
            title=self.form.title,
            body=self.form.body,
            status=status,
            excerpt=self.form.excerpt or None,
            featured_image=self.form.featured_image or None,
            tags=tuple(self.tag_set),
        )

    def submit(self, status: Union[ArticleStatus, str]) -> "asyncio.Task[Any]":
        """
        Запустить сохранение и вернуть задачу.

        Проверки выполняются сразу, до запуска задачи и без обращения
        к бэкенду.

        Raises:
            DomainValidationError: пустой заголовок или текст
            BusinessRuleViolation: статус не draft/pending
            SaveInProgressError: предыдущее сохранение ещё идёт
        """
        command = self.build_command(status)
        self.handler.validate(command)
        return self._save_task.start(lambda: self._persist(command))

    async def save(self, status: Union[ArticleStatus, str]) -> SaveOutcome:
        """Сохранить и дождаться результата."""
        return await self.submit(status)

    def cancel(self) -> bool:
        """Отменить идущее сохранение."""
        return self._save_task.cancel()

    async def _persist(self, command: CreateArticleCommand) -> SaveOutcome:
        try:
            article = await self.handler.handle_create_article(command)
        except BackendError as e:
            logger.warning(f"Save as {command.status.value} failed for {command.author_id}: {e.message}")
            raise
        return SaveOutcome(article=article, message=success_message(command.status))
