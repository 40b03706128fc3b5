"""Инструменты подготовки и очистки docker compose окружений для интеграционных тестов."""

from __future__ import annotations

from compose_testkit.docker_api.models import ContainerName
from compose_testkit.shutdown import (
    AggressiveShutdownStrategy,
    ShutdownStrategy,
    ShutdownStrategyType,
    SkipShutdownStrategy,
    create_shutdown_strategy,
    is_transient_driver_failure,
)

__version__ = "0.1.0"

__all__ = [
    "AggressiveShutdownStrategy",
    "ContainerName",
    "ShutdownStrategy",
    "ShutdownStrategyType",
    "SkipShutdownStrategy",
    "__version__",
    "create_shutdown_strategy",
    "is_transient_driver_failure",
]
