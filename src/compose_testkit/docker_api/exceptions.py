"""Исключения, возникающие при обращении к Docker Engine."""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional

LOGGER = logging.getLogger(__name__)


class DockerAPIError(Exception):
    """Базовая ошибка работы с Docker, хранит сообщение и контекст."""

    def __init__(self, message: str, *, context: Optional[Dict[str, Any]] = None) -> None:
        """Сохраняет сообщение и контекст.

        Уровень, с которым ошибка попадёт в журнал, выбирает код, который её
        обрабатывает; здесь пишется только отладочная запись.
        """

        self.message = message
        self.context = context or {}
        super().__init__(message)
        LOGGER.debug("%s | context=%s", message, self.context)


class DockerExecutionError(DockerAPIError):
    """Docker Engine отклонил операцию (например, удаление контейнера)."""

    def __init__(self, message: str, *, operation: str = "", targets: Optional[list] = None) -> None:
        self.operation = operation
        self.targets = list(targets or [])
        super().__init__(
            message,
            context={"operation": operation, "targets": self.targets},
        )


class DockerCancellationError(DockerAPIError):
    """Операция прервана до получения ответа от Docker (таймаут или отмена)."""

    def __init__(self, operation: str, reason: str) -> None:
        self.operation = operation
        self.reason = reason
        super().__init__(
            f"Docker operation '{operation}' was cancelled: {reason}",
            context={"operation": operation, "reason": reason},
        )
