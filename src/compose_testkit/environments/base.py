"""Контракт окружения, которое умеет перечислять и удалять свои контейнеры."""

from __future__ import annotations

from typing import List, Protocol, Sequence, runtime_checkable

from compose_testkit.docker_api.models import ContainerName


@runtime_checkable
class Environment(Protocol):
    """Набор контейнеров одного тестового прогона."""

    def list_running_containers(self) -> List[ContainerName]:
        """Возвращает свежий снимок запущенных контейнеров."""

    def remove_containers(self, raw_names: Sequence[str]) -> None:
        """Удаляет контейнеры по сырым именам; пустой список ничего не делает."""
