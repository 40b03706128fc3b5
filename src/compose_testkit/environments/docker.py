"""Окружение docker compose, обслуживаемое через docker SDK."""

from __future__ import annotations

import logging
from typing import List, Sequence

from compose_testkit.docker_api import containers
from compose_testkit.docker_api.client import DockerClientWrapper
from compose_testkit.docker_api.models import ContainerName

LOGGER = logging.getLogger(__name__)


class DockerEnvironment:
    """Контейнеры одного compose-проекта на конкретном Docker Engine."""

    def __init__(self, client: DockerClientWrapper, project_name: str) -> None:
        if not project_name:
            raise ValueError("Compose project name must not be empty")
        self.client = client
        self.project_name = project_name

    def list_running_containers(self) -> List[ContainerName]:
        running = containers.list_running_containers(self.client, self.project_name)
        LOGGER.debug("Project %s has %d running containers", self.project_name, len(running))
        return running

    def remove_containers(self, raw_names: Sequence[str]) -> None:
        if not raw_names:
            return
        containers.remove_containers(self.client, raw_names)

    def __repr__(self) -> str:
        return f"DockerEnvironment(project_name={self.project_name!r})"
