"""Реестр стратегий остановки, выбираемых по значению из конфигурации."""

from __future__ import annotations

import logging
from enum import Enum
from typing import Callable, Dict, List, Optional

from compose_testkit.shutdown.aggressive import AggressiveShutdownStrategy
from compose_testkit.shutdown.base import ShutdownStrategy
from compose_testkit.shutdown.skip import SkipShutdownStrategy

StrategyFactory = Callable[[Optional[logging.Logger]], ShutdownStrategy]


class ShutdownStrategyType(str, Enum):
    """Известные варианты остановки окружения."""

    AGGRESSIVE = "aggressive"
    SKIP = "skip"


class UnknownShutdownStrategyError(ValueError):
    """Запрошена стратегия, которой нет в реестре."""

    def __init__(self, kind: object, available: List[str]) -> None:
        self.kind = kind
        self.available = available
        super().__init__(f"Unknown shutdown strategy {kind!r}, expected one of: {available}")


_STRATEGIES: Dict[ShutdownStrategyType, StrategyFactory] = {
    ShutdownStrategyType.AGGRESSIVE: AggressiveShutdownStrategy,
    ShutdownStrategyType.SKIP: SkipShutdownStrategy,
}


def normalize_strategy_name(name: str) -> str:
    """Приводит имя стратегии из конфигурации к значению ShutdownStrategyType."""

    return name.strip().lower()


def available_strategies() -> List[str]:
    """Возвращает строковые значения зарегистрированных стратегий."""

    return [kind.value for kind in _STRATEGIES]


def register_strategy(kind: ShutdownStrategyType, factory: StrategyFactory) -> None:
    """Заменяет фабрику одного из вариантов ShutdownStrategyType.

    Набор вариантов фиксирован перечислением; новый вариант добавляется в
    ShutdownStrategyType вместе со своей фабрикой.
    """

    _STRATEGIES[kind] = factory


def resolve_strategy_type(kind: ShutdownStrategyType | str) -> ShutdownStrategyType:
    """Приводит строку из конфигурации к ShutdownStrategyType."""

    if isinstance(kind, ShutdownStrategyType):
        return kind
    try:
        return ShutdownStrategyType(normalize_strategy_name(str(kind)))
    except ValueError:
        raise UnknownShutdownStrategyError(kind, available_strategies()) from None


def create_shutdown_strategy(
    kind: ShutdownStrategyType | str = ShutdownStrategyType.AGGRESSIVE,
    logger: Optional[logging.Logger] = None,
) -> ShutdownStrategy:
    """Создаёт стратегию по её типу, передавая ей логгер."""

    resolved = resolve_strategy_type(kind)
    factory = _STRATEGIES.get(resolved)
    if factory is None:
        raise UnknownShutdownStrategyError(kind, available_strategies())
    return factory(logger)
