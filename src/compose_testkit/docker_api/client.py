"""Обёртка над docker-py с безопасной инициализацией."""

from __future__ import annotations

import logging
from typing import Any

import docker
from docker.errors import DockerException

from compose_testkit.connections.models import Connection
from compose_testkit.docker_api.exceptions import DockerAPIError
from compose_testkit.utils.helpers import normalize_socket_path

LOGGER = logging.getLogger(__name__)


class DockerClientWrapper:
    """Управляет созданием и использованием docker API client."""

    def __init__(self, connection: Connection, raw_client: Any | None = None) -> None:
        self.connection = connection
        self._client = raw_client or self._create_client()

    def _create_client(self) -> Any:
        socket = normalize_socket_path(self.connection.socket)
        try:
            if not socket:
                return docker.from_env(timeout=self.connection.timeout_seconds)
            return docker.DockerClient(base_url=socket, timeout=self.connection.timeout_seconds)
        except DockerException as exc:
            LOGGER.error(
                "Docker client init error for connection %s (%s) via %s: %s",
                self.connection.identifier,
                self.connection.name,
                socket or "environment",
                exc,
            )
            raise DockerAPIError(str(exc), context={"connection": self.connection.identifier}) from exc

    def get_raw_client(self) -> Any:
        """Возвращает внутренний docker client."""

        return self._client

    def ping(self) -> bool:
        """Проверяет доступность Docker."""

        try:
            self._client.ping()
            return True
        except (DockerException, OSError) as exc:
            LOGGER.error("Docker ping failed: %s", exc)
            return False
