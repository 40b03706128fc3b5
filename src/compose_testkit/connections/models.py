"""Модели данных для описания соединений Docker."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict

DEFAULT_TIMEOUT_SECONDS = 60


@dataclass(slots=True)
class Connection:
    """Описание подключения к Docker Engine, на котором живёт тестовое окружение."""

    identifier: str
    name: str
    socket: str = ""  # пустая строка означает DOCKER_HOST / настройки по умолчанию
    timeout_seconds: int = DEFAULT_TIMEOUT_SECONDS

    def to_dict(self) -> Dict[str, Any]:
        """Сериализует модель в dict."""

        return {
            "id": self.identifier,
            "name": self.name,
            "socket": self.socket,
            "timeout_seconds": self.timeout_seconds,
        }
