"""Загрузка и хранение конфигурации testkit."""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Tuple

from compose_testkit.settings.exceptions import (
    SettingsIOError,
    SettingsNotFoundError,
    SettingsValidationError,
)
from compose_testkit.settings.groups import (
    DockerSettings,
    LoggingSettings,
    SettingsGroup,
    ShutdownSettings,
)

DEFAULT_CONFIG_FILE = "compose-testkit.json"

# Переменная окружения -> (группа, ключ)
ENVIRONMENT_OVERRIDES: Dict[str, Tuple[str, str]] = {
    "COMPOSE_TESTKIT_SHUTDOWN_STRATEGY": ("shutdown", "strategy"),
    "COMPOSE_TESTKIT_PROJECT_NAME": ("docker", "project_name"),
    "COMPOSE_TESTKIT_DOCKER_SOCKET": ("docker", "socket"),
}


class TestkitSettings:
    """Набор групп настроек, загружаемый из JSON и переменных окружения."""

    __test__ = False  # не коллекционировать как тестовый класс pytest

    def __init__(self, config_path: Optional[Path] = None) -> None:
        self._logger = logging.getLogger(__name__)
        self._file_path = config_path or Path.cwd() / DEFAULT_CONFIG_FILE
        self._settings: Dict[str, SettingsGroup] = {
            "docker": DockerSettings(),
            "shutdown": ShutdownSettings(),
            "logging": LoggingSettings(),
        }

    @property
    def config_path(self) -> Path:
        return self._file_path

    # --------------------------------------------------------------------- API
    def get_value(self, group: str, key: str, default: Any = None) -> Any:
        settings_group = self._settings.get(group)
        if not settings_group:
            if default is not None:
                return default
            raise SettingsNotFoundError(group, key)
        try:
            return settings_group.get(key)
        except SettingsNotFoundError:
            if default is not None:
                return default
            raise

    def set_value(self, group: str, key: str, value: Any) -> None:
        self.get_group(group).set(key, value)

    def get_group(self, group: str) -> SettingsGroup:
        try:
            return self._settings[group]
        except KeyError:
            raise SettingsNotFoundError(group, None) from None

    def load_from_dict(self, data: Mapping[str, Any]) -> None:
        """Применяет значения групп из словаря поверх текущих."""

        for name, group_data in data.items():
            group = self._settings.get(name)
            if group is None:
                self._logger.debug("Ignoring unknown settings group %s", name)
                continue
            if not isinstance(group_data, dict):
                raise SettingsValidationError(key=name, value=group_data, reason="expected an object")
            group.from_dict(group_data)

    def load_from_disk(self, path: Optional[Path] = None) -> None:
        """Читает JSON файл; отсутствующий файл означает настройки по умолчанию."""

        target = path or self._file_path
        if not target.exists():
            self._logger.info("Config file %s not found, using defaults.", target)
            return
        try:
            content = json.loads(target.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as exc:
            raise SettingsIOError(target, str(exc)) from exc
        if not isinstance(content, dict):
            raise SettingsIOError(target, "top-level JSON value must be an object")
        self.load_from_dict(content)

    def apply_environment(self, environ: Optional[Mapping[str, str]] = None) -> None:
        """Переопределяет значения из переменных окружения COMPOSE_TESTKIT_*."""

        source = os.environ if environ is None else environ
        for variable, (group, key) in ENVIRONMENT_OVERRIDES.items():
            value = source.get(variable)
            if value is None:
                continue
            self._logger.debug("Setting %s.%s from %s", group, key, variable)
            self.set_value(group, key, value)

    def to_dict(self) -> Dict[str, Any]:
        return {name: group.to_dict() for name, group in self._settings.items()}

    def reset_to_defaults(self) -> None:
        for group in self._settings.values():
            group.reset_to_defaults()


def load_settings(
    config_path: Optional[Path] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> TestkitSettings:
    """Создаёт настройки: значения по умолчанию, затем файл, затем окружение."""

    settings = TestkitSettings(config_path)
    settings.load_from_disk()
    settings.apply_environment(environ)
    return settings
