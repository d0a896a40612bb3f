# -*- coding: utf-8 -*-
"""
ExclusiveTask — одна задача действия одновременно.

Повторный запуск, пока предыдущий не завершён, отклоняется.
Запущенную задачу можно отменить.
"""

import asyncio
import logging
from typing import Any, Awaitable, Callable, Optional

from blogify.shared.exceptions.domain_exceptions import SaveInProgressError

logger = logging.getLogger(__name__)


class ExclusiveTask:
    """
    Дескриптор задачи для одного действия (например, сохранения формы).

    Использование:
        action = ExclusiveTask("save")
        task = action.start(lambda: handler.handle_create_article(command))
        result = await task
    """

    def __init__(self, name: str):
        self.name = name
        self._task: Optional["asyncio.Task[Any]"] = None

    @property
    def is_running(self) -> bool:
        return self._task is not None and not self._task.done()

    def start(self, action: Callable[[], Awaitable[Any]]) -> "asyncio.Task[Any]":
        """
        Запустить действие.

        Raises:
            SaveInProgressError: предыдущий запуск ещё выполняется
        """
        if self.is_running:
            raise SaveInProgressError(f"{self.name} is already in progress")

        self._task = asyncio.ensure_future(action())
        self._task.add_done_callback(self._release)
        return self._task

    def cancel(self) -> bool:
        """Отменить текущий запуск. False если отменять нечего."""
        if not self.is_running:
            return False
        logger.info(f"Cancelling {self.name}")
        return self._task.cancel()

    def _release(self, task: "asyncio.Task[Any]") -> None:
        if self._task is task:
            self._task = None
