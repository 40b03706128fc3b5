"""Стратегия немедленного принудительного удаления контейнеров."""

from __future__ import annotations

from typing import List, Optional, Sequence

from compose_testkit.docker_api.exceptions import DockerExecutionError
from compose_testkit.environments.base import Environment
from compose_testkit.shutdown.base import ShutdownStrategy
from compose_testkit.shutdown.classification import (
    BTRFS_ERROR_DOCS_URL,
    is_transient_driver_failure,
)


class AggressiveShutdownStrategy(ShutdownStrategy):
    """Удаляет контейнеры как можно быстрее, не давая им завершить IO.

    Сбой btrfs драйвера повторяется ровно один раз без задержки; если он
    случается снова, ошибка подавляется с предупреждением в логе.
    """

    def shutdown(self, environment: Environment) -> None:
        running = environment.list_running_containers()
        self._logger.info("Shutting down %s", [container.semantic_name for container in running])

        raw_names: List[str] = [container.raw_name for container in running]
        failure = self._remove_containers(environment, raw_names)
        if failure is None:
            return

        self._logger.debug("First shutdown attempt failed due to btrfs volume error... retrying")
        failure = self._remove_containers(environment, raw_names)
        if failure is None:
            return

        self._logger.warning(
            "Couldn't shut down containers due to btrfs volume error, see %s for more info.",
            BTRFS_ERROR_DOCS_URL,
        )

    def _remove_containers(
        self,
        environment: Environment,
        raw_names: Sequence[str],
    ) -> Optional[DockerExecutionError]:
        """Одна попытка удаления: None при успехе, ошибка btrfs при временном сбое."""

        try:
            environment.remove_containers(raw_names)
        except DockerExecutionError as exc:
            if not is_transient_driver_failure(exc.message):
                raise
            return exc
        self._logger.debug("Finished shutdown")
        return None
