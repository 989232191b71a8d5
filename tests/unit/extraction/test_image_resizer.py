import pytest
import numpy as np

from bulletin_ocr.extraction.pre_ocr.elements.image_resizer import ImageResizer
from config.settings import MAX_IMAGE_SIZE


@pytest.fixture
def resizer():
    return ImageResizer()


def test_small_image_not_resized(resizer):
    """Тест: изображение меньше потолка остаётся как есть (не увеличивается)."""
    img = np.zeros((300, 400, 3), dtype=np.uint8)
    result = resizer.process(img)

    assert result.was_resized is False
    assert result.resized_size == (400, 300)
    assert result.scale_factor == 1.0
    assert result.image is img


def test_exact_cap_not_resized(resizer):
    """Тест: большая сторона ровно MAX_IMAGE_SIZE - без изменений."""
    img = np.zeros((1000, MAX_IMAGE_SIZE, 3), dtype=np.uint8)
    result = resizer.process(img)

    assert result.was_resized is False
    assert result.resized_size == (MAX_IMAGE_SIZE, 1000)


def test_landscape_resized_to_cap(resizer):
    """Тест: широкое изображение - ширина становится ровно 2000."""
    img = np.zeros((3000, 4000, 3), dtype=np.uint8)
    result = resizer.process(img)

    assert result.was_resized is True
    assert result.resized_size == (2000, 1500)
    assert result.image.shape == (1500, 2000, 3)


def test_portrait_resized_to_cap(resizer):
    """Тест: высокое изображение - высота становится ровно 2000."""
    img = np.zeros((4032, 3024, 3), dtype=np.uint8)
    result = resizer.process(img)

    assert result.resized_size == (1500, 2000)
    assert result.image.shape[:2] == (2000, 1500)


def test_fractional_side_is_rounded_not_truncated(resizer):
    """Тест: 3001x2001 -> меньшая сторона 1333.56 округляется до 1334."""
    assert resizer.compute_target_size(3001, 2001) == (2000, 1334)


@pytest.mark.parametrize("width,height", [
    (2001, 1), (4000, 3000), (2500, 2500), (1234, 5678), (1999, 1999), (7, 3),
])
def test_resize_bound_and_aspect_ratio(resizer, width, height):
    """Тест: max стороны = min(D, 2000), пропорции в пределах одного пикселя."""
    new_w, new_h = resizer.compute_target_size(width, height)

    assert max(new_w, new_h) == min(max(width, height), MAX_IMAGE_SIZE)
    if width >= height:
        assert abs(new_h - height * new_w / width) <= 1
    else:
        assert abs(new_w - width * new_h / height) <= 1


def test_grayscale_input_resized(resizer):
    """Тест: одноканальное изображение тоже уменьшается."""
    img = np.zeros((2200, 1100), dtype=np.uint8)
    result = resizer.process(img)

    assert result.image.shape == (2000, 1000)
