"""Bulletin OCR - извлечение оценок из фотографии школьного бюллетеня."""

__version__ = "0.1.0"
