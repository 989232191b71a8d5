"""Настройки проекта Bulletin OCR (см. settings.py)."""
