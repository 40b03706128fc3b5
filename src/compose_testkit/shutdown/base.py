"""Абстракция стратегии остановки тестового окружения."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Optional

from compose_testkit.environments.base import Environment


class ShutdownStrategy(ABC):
    """Политика, по которой удаляются контейнеры окружения после тестов.

    Успешный возврат из ``shutdown`` означает, что окружение очищено либо
    встретился известный безвредный дефект драйвера. Любая другая ошибка
    (``OSError``, ``DockerCancellationError``, ``DockerExecutionError``)
    пробрасывается вызывающему коду.
    """

    def __init__(self, logger: Optional[logging.Logger] = None) -> None:
        self._logger = logger or logging.getLogger(type(self).__module__)

    @property
    def logger(self) -> logging.Logger:
        return self._logger

    @abstractmethod
    def shutdown(self, environment: Environment) -> None:
        """Останавливает и удаляет контейнеры окружения."""
