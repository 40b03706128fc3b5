"""Низкоуровневые операции с Docker Engine через docker SDK."""
