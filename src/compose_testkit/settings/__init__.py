"""Конфигурация compose-testkit."""
