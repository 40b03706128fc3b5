"""Различные вспомогательные функции."""

from __future__ import annotations

from typing import Iterable, List

_SOCKET_SCHEMES = ("unix://", "tcp://", "npipe://", "http://", "https://", "ssh://")


def normalize_socket_path(raw_value: str) -> str:
    """Возвращает путь сокета с корректным префиксом unix://."""

    value = raw_value.strip()
    if not value:
        return value
    if value.lower().startswith(_SOCKET_SCHEMES):
        return value
    if value.startswith("/"):
        return f"unix://{value}"
    return value


def join_failures(failures: Iterable[str]) -> str:
    """Склеивает сообщения об ошибках по одному на строку, как это делает docker CLI."""

    lines: List[str] = [failure.strip() for failure in failures if failure and failure.strip()]
    return "\n".join(lines)
