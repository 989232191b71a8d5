"""
DTO контракт: D1 (Extraction) -> D2 (Parsing)

Данные, которые проходят через домен Extraction за один прогон:
загруженный файл -> подготовленное изображение -> распознанный текст.

Ни один из этих объектов не сохраняется: они живут ровно один прогон.
"""

from dataclasses import dataclass, field
from typing import List, Optional, Tuple


@dataclass
class RawImage:
    """
    Загруженный файл бюллетеня как есть.

    size_bytes - ЗАЯВЛЕННЫЙ размер (из формы загрузки). Проверяется
    до декодирования, поэтому может отличаться от len(content).
    """
    content: bytes                       # Байты файла
    mime_type: str                       # Заявленный MIME тип (image/png, image/jpeg)
    size_bytes: Optional[int] = None     # Заявленный размер, по умолчанию len(content)
    source_name: str = "upload"          # Имя файла (для логов и результата)

    def __post_init__(self) -> None:
        if self.size_bytes is None:
            self.size_bytes = len(self.content)


@dataclass
class PreprocessedImage:
    """
    Изображение, готовое для OCR.

    content всегда PNG (без потерь), чтобы повторная бинаризация
    давала тот же самый результат.
    """
    content: bytes                                            # PNG байты
    width: int                                                # Ширина после resize (px)
    height: int                                               # Высота после resize (px)
    original_size: Tuple[int, int] = (0, 0)                   # (width, height) до обработки
    applied: List[str] = field(default_factory=list)          # resize, grayscale, binarize


@dataclass
class RecognizedText:
    """
    Сырой ответ OCR движка.
    """
    text: str                    # Полный текст, строки через \n
    confidence: float = 0.0      # Общая уверенность движка (0.0 - 1.0)
    engine: str = "unknown"      # Имя движка (tesseract, google_vision, ...)

    def has_content(self) -> bool:
        """Есть ли хоть один непустой символ."""
        return bool(self.text and self.text.strip())
