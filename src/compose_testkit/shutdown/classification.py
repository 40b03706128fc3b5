"""Классификация ошибок удаления контейнеров."""

from __future__ import annotations

from typing import Final

# Фрагмент сообщения Docker об известном дефекте btrfs storage driver
TRANSIENT_DRIVER_FAILURE_MARKER: Final[str] = "Driver btrfs failed to remove"
BTRFS_ERROR_DOCS_URL: Final[str] = "https://circleci.com/docs/docker-btrfs-error/"


def is_transient_driver_failure(message: str) -> bool:
    """True, если сообщение об ошибке указывает на временный сбой btrfs драйвера."""

    return TRANSIENT_DRIVER_FAILURE_MARKER in message
