"""Окружения, контейнеры которых обслуживают стратегии остановки."""

from __future__ import annotations

from compose_testkit.environments.base import Environment

__all__ = ["Environment"]
