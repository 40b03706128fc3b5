"""Группы настроек testkit с валидацией значений."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Dict, Tuple

from compose_testkit.connections.models import DEFAULT_TIMEOUT_SECONDS
from compose_testkit.settings.exceptions import SettingsNotFoundError, SettingsValidationError
from compose_testkit.settings.validators import (
    CompositeValidator,
    EnumValidator,
    RangeValidator,
    RegexValidator,
    TypeValidator,
    Validator,
)
from compose_testkit.shutdown.registry import ShutdownStrategyType, normalize_strategy_name

# Имена проектов docker compose: строчные буквы, цифры, '_' и '-'; пустое значение допустимо
PROJECT_NAME_PATTERN = r"^([a-z0-9][a-z0-9_-]*)?$"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


class SettingsGroup(ABC):
    """Абстрактная база для конкретных групп настроек."""

    group_name: str = ""

    def __init__(self) -> None:
        self._defaults: Dict[str, Any] = {}
        self._validators: Dict[str, Validator] = {}
        self._values: Dict[str, Any] = {}
        self._initialize_defaults()
        self._setup_validators()
        self.reset_to_defaults()

    @abstractmethod
    def _initialize_defaults(self) -> None:
        """Задаёт значения по умолчанию для группы."""

    @abstractmethod
    def _setup_validators(self) -> None:
        """Привязывает валидаторы к ключам группы."""

    def keys(self) -> Tuple[str, ...]:
        return tuple(self._defaults.keys())

    def get(self, key: str, default: Any = None) -> Any:
        if key not in self._defaults:
            raise SettingsNotFoundError(self.group_name, key)
        return self._values.get(key, default)

    def validate(self, key: str, value: Any) -> Tuple[bool, str]:
        validator = self._validators.get(key)
        if not validator:
            return True, ""
        return validator.validate(value)

    def set(self, key: str, value: Any) -> None:
        """Сохраняет значение, выбрасывая SettingsValidationError при невалидных данных."""

        if key not in self._defaults:
            raise SettingsNotFoundError(self.group_name, key)
        is_valid, error = self.validate(key, value)
        if not is_valid:
            raise SettingsValidationError(
                key=f"{self.group_name}.{key}",
                value=value,
                reason=error,
            )
        self._values[key] = value

    def to_dict(self) -> Dict[str, Any]:
        return dict(self._values)

    def from_dict(self, data: Dict[str, Any]) -> None:
        """Заполняет значениями из словаря; незнакомые ключи игнорируются."""

        for key, value in data.items():
            if key in self._defaults:
                self.set(key, value)

    def reset_to_defaults(self) -> None:
        self._values = dict(self._defaults)


class DockerSettings(SettingsGroup):
    """Подключение к Docker Engine и имя compose-проекта."""

    group_name = "docker"

    def _initialize_defaults(self) -> None:
        self._defaults = {
            "socket": "",
            "project_name": "",
            "timeout_seconds": DEFAULT_TIMEOUT_SECONDS,
        }

    def _setup_validators(self) -> None:
        self._validators = {
            "socket": TypeValidator(str),
            "project_name": RegexValidator(PROJECT_NAME_PATTERN),
            "timeout_seconds": CompositeValidator([TypeValidator(int), RangeValidator(1, 3600)]),
        }


class ShutdownSettings(SettingsGroup):
    """Выбор стратегии остановки окружения."""

    group_name = "shutdown"

    def _initialize_defaults(self) -> None:
        self._defaults = {"strategy": "aggressive"}

    def _setup_validators(self) -> None:
        self._validators = {
            "strategy": CompositeValidator(
                [TypeValidator(str), EnumValidator(kind.value for kind in ShutdownStrategyType)]
            ),
        }

    def set(self, key: str, value: Any) -> None:
        """Имя стратегии хранится в каноническом виде (" Aggressive " -> "aggressive")."""

        if key == "strategy" and isinstance(value, str):
            value = normalize_strategy_name(value)
        super().set(key, value)


class LoggingSettings(SettingsGroup):
    """Настройки логирования."""

    group_name = "logging"

    def _initialize_defaults(self) -> None:
        self._defaults = {
            "enabled": True,
            "level": "INFO",
            "log_dir": "",
            "max_file_size_mb": 10,
            "max_archived_files": 5,
        }

    def _setup_validators(self) -> None:
        self._validators = {
            "enabled": TypeValidator(bool),
            "level": EnumValidator(LOG_LEVELS),
            "log_dir": TypeValidator(str),
            "max_file_size_mb": CompositeValidator([TypeValidator(int), RangeValidator(1, 1000)]),
            "max_archived_files": CompositeValidator([TypeValidator(int), RangeValidator(1, 50)]),
        }
