"""Описание подключений к Docker Engine."""
