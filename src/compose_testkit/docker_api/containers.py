"""Функции для работы с контейнерами через Docker client."""

from __future__ import annotations

import logging
from typing import List, Sequence

from docker.errors import APIError
from requests.exceptions import ReadTimeout

from compose_testkit.docker_api.client import DockerClientWrapper
from compose_testkit.docker_api.exceptions import DockerCancellationError, DockerExecutionError
from compose_testkit.docker_api.models import ContainerName
from compose_testkit.utils.helpers import join_failures

LOGGER = logging.getLogger(__name__)

PROJECT_LABEL = "com.docker.compose.project"


def list_running_containers(client: DockerClientWrapper, project_name: str) -> List[ContainerName]:
    """Возвращает запущенные контейнеры compose-проекта в порядке, заданном Docker."""

    raw = client.get_raw_client()
    try:
        containers = raw.containers.list(filters={"label": f"{PROJECT_LABEL}={project_name}"})
    except ReadTimeout as exc:
        raise DockerCancellationError("ps", str(exc)) from exc
    except APIError as exc:
        raise DockerExecutionError(str(exc), operation="ps", targets=[project_name]) from exc
    return [
        ContainerName.from_labels(container.name, getattr(container, "labels", None), project_name)
        for container in containers
    ]


def remove_containers(client: DockerClientWrapper, raw_names: Sequence[str]) -> None:
    """Принудительно удаляет контейнеры (аналог ``docker rm -f``).

    Обрабатываются все имена; ошибки собираются и поднимаются одним
    DockerExecutionError после прохода по списку.
    """

    raw = client.get_raw_client()
    failures: List[str] = []
    for name in raw_names:
        try:
            raw.api.remove_container(name, force=True)
        except ReadTimeout as exc:
            raise DockerCancellationError("rm", str(exc)) from exc
        except APIError as exc:
            LOGGER.debug("Failed to remove container %s: %s", name, exc)
            failures.append(str(exc))
    if failures:
        raise DockerExecutionError(
            join_failures(failures),
            operation="rm",
            targets=list(raw_names),
        )
