"""Упрощённые структуры данных для описания объектов Docker."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Mapping, Optional

SERVICE_LABEL = "com.docker.compose.service"
CONTAINER_NUMBER_LABEL = "com.docker.compose.container-number"

# <project>_<service>_<index> (compose v1) или <project>-<service>-<index> (compose v2)
_COMPOSE_NAME_SEPARATORS = ("_", "-")
_INDEX_PATTERN = re.compile(r"^[0-9]+$")


@dataclass(frozen=True, slots=True)
class ContainerName:
    """Имя контейнера: сырое (для Docker) и смысловое (для логов)."""

    raw_name: str  # передаётся в docker rm без изменений
    semantic_name: str  # сервис + номер экземпляра

    def __post_init__(self) -> None:
        if not self.raw_name:
            raise ValueError("Container raw name must not be empty")
        if not self.semantic_name:
            raise ValueError(f"Semantic name of container '{self.raw_name}' must not be empty")

    @classmethod
    def from_raw_name(cls, raw_name: str, project_name: Optional[str] = None) -> "ContainerName":
        """Выводит смысловое имя из имени, сгенерированного docker compose.

        Имена вида ``project_db_1`` превращаются в ``db_1``. Имена, заданные
        вручную через ``container_name``, используются как есть.

        Если project_name известен, префикс проекта отрезается целиком
        (``my-proj-web-1`` -> ``web_1``). Без него проектом считается только
        первый компонент, поэтому дефис в имени проекта попадает в имя сервиса
        (``my-proj-web-1`` -> ``proj-web_1``).
        """

        for separator in _COMPOSE_NAME_SEPARATORS:
            if project_name:
                prefix = f"{project_name}{separator}"
                if not raw_name.startswith(prefix):
                    continue
                service, found, index = raw_name[len(prefix):].rpartition(separator)
                if found and service and _INDEX_PATTERN.match(index):
                    return cls(raw_name=raw_name, semantic_name=f"{service}_{index}")
                continue
            parts = raw_name.split(separator)
            if len(parts) >= 3 and _INDEX_PATTERN.match(parts[-1]):
                service = separator.join(parts[1:-1])
                return cls(raw_name=raw_name, semantic_name=f"{service}_{parts[-1]}")
        return cls(raw_name=raw_name, semantic_name=raw_name)

    @classmethod
    def from_labels(
        cls,
        raw_name: str,
        labels: Optional[Mapping[str, str]],
        project_name: Optional[str] = None,
    ) -> "ContainerName":
        """Строит имя по меткам compose, а при их отсутствии разбирает raw_name."""

        labels = labels or {}
        service = labels.get(SERVICE_LABEL)
        number = labels.get(CONTAINER_NUMBER_LABEL)
        if service and number:
            return cls(raw_name=raw_name, semantic_name=f"{service}_{number}")
        return cls.from_raw_name(raw_name, project_name)

    def __str__(self) -> str:
        return self.semantic_name
