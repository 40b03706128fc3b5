"""Стратегия, оставляющая контейнеры запущенными."""

from __future__ import annotations

from compose_testkit.environments.base import Environment
from compose_testkit.shutdown.base import ShutdownStrategy


class SkipShutdownStrategy(ShutdownStrategy):
    """Ничего не удаляет: удобно для разбора упавших тестов вручную."""

    def shutdown(self, environment: Environment) -> None:
        self._logger.warning(
            "Skipping shutdown of %r, containers are left running and must be removed manually",
            environment,
        )
