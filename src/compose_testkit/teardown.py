"""Точки входа для очистки тестового окружения по конфигурации."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Optional

from compose_testkit.connections.models import Connection
from compose_testkit.docker_api.client import DockerClientWrapper
from compose_testkit.environments.base import Environment
from compose_testkit.environments.docker import DockerEnvironment
from compose_testkit.settings.registry import TestkitSettings
from compose_testkit.shutdown.registry import create_shutdown_strategy
from compose_testkit.utils.logger import configure_logging

LOGGER = logging.getLogger(__name__)


def setup_logging_from_settings(settings: TestkitSettings) -> None:
    """Настраивает логирование в соответствии с группой logging."""

    logging_settings = settings.get_group("logging")
    if not logging_settings.get("enabled"):
        logging.disable(logging.CRITICAL)
        return

    logging.disable(logging.NOTSET)
    log_dir = logging_settings.get("log_dir")
    configure_logging(
        log_dir=Path(log_dir).expanduser() if log_dir else None,
        level_name=logging_settings.get("level", "INFO"),
        max_bytes=logging_settings.get("max_file_size_mb", 10) * 1024 * 1024,
        backup_count=logging_settings.get("max_archived_files", 5),
    )


def create_environment(settings: TestkitSettings, raw_client: Any | None = None) -> DockerEnvironment:
    """Создаёт DockerEnvironment для проекта из группы docker."""

    docker_settings = settings.get_group("docker")
    connection = Connection(
        identifier="testkit",
        name=docker_settings.get("project_name") or "testkit",
        socket=docker_settings.get("socket"),
        timeout_seconds=docker_settings.get("timeout_seconds"),
    )
    client = DockerClientWrapper(connection, raw_client=raw_client)
    return DockerEnvironment(client, docker_settings.get("project_name"))


def shutdown_environment(
    environment: Environment,
    settings: TestkitSettings,
    logger: Optional[logging.Logger] = None,
) -> None:
    """Останавливает окружение стратегией из shutdown.strategy."""

    kind = settings.get_value("shutdown", "strategy")
    LOGGER.debug("Using %s shutdown strategy for %r", kind, environment)
    strategy = create_shutdown_strategy(kind, logger=logger)
    strategy.shutdown(environment)
