"""Стратегии остановки тестовых окружений."""

from __future__ import annotations

from compose_testkit.shutdown.aggressive import AggressiveShutdownStrategy
from compose_testkit.shutdown.base import ShutdownStrategy
from compose_testkit.shutdown.classification import (
    TRANSIENT_DRIVER_FAILURE_MARKER,
    is_transient_driver_failure,
)
from compose_testkit.shutdown.registry import (
    ShutdownStrategyType,
    UnknownShutdownStrategyError,
    available_strategies,
    create_shutdown_strategy,
    normalize_strategy_name,
    register_strategy,
)
from compose_testkit.shutdown.skip import SkipShutdownStrategy

__all__ = [
    "AggressiveShutdownStrategy",
    "ShutdownStrategy",
    "ShutdownStrategyType",
    "SkipShutdownStrategy",
    "TRANSIENT_DRIVER_FAILURE_MARKER",
    "UnknownShutdownStrategyError",
    "available_strategies",
    "create_shutdown_strategy",
    "is_transient_driver_failure",
    "normalize_strategy_name",
    "register_strategy",
]
