"""
Pre-OCR Domain: Исключения.
"""


class PreOCRError(Exception):
    """Базовое исключение для Pre-OCR."""
    pass


class ImageDecodingError(PreOCRError):
    """Не удалось распознать формат или декодировать изображение."""
    pass


class ResizeError(PreOCRError):
    """Ошибка при изменении размера изображения."""
    pass


class EncodingError(PreOCRError):
    """Ошибка при кодировании изображения."""
    pass
