import numpy as np
import pytest

from pdfcompare.compare.pixels import (
    BLACK,
    WHITE,
    PixelBuffer,
    blue,
    clamp,
    darkness,
    fade,
    fade_sample,
    green,
    pack_rgb,
    red,
)
from pdfcompare.errors import OutOfBoundsError


def test_channels():
    sample = 0x123456
    assert red(sample) == 0x12
    assert green(sample) == 0x34
    assert blue(sample) == 0x56
    assert pack_rgb(0x12, 0x34, 0x56) == sample


def test_darkness_counts_red_twice_and_ignores_blue():
    assert darkness(0xFF0000) == 510
    assert darkness(0x00FF00) == 255
    assert darkness(0x0000FF) == 0
    assert darkness(0xFF0000) != darkness(0x00FF00)


def test_darkness_monotonic_with_red_weighted_more():
    base = 0x202020
    red_delta = darkness(base + 0x100000) - darkness(base)
    green_delta = darkness(base + 0x001000) - darkness(base)
    blue_delta = darkness(base + 0x000010) - darkness(base)
    assert red_delta == 32
    assert green_delta == 16
    assert blue_delta == 0
    assert red_delta > green_delta >= blue_delta


def test_darkness_on_arrays():
    samples = np.array([[0xFF0000, 0x00FF00]], dtype=np.uint32)
    assert darkness(samples).tolist() == [[510, 255]]


def test_fade_values():
    assert fade(0) == 204
    assert fade(100) == 224
    assert fade(255) == 255


def test_fade_is_not_idempotent():
    assert fade(fade(0)) == 244
    assert fade(fade(0)) != fade(0)
    assert fade(fade(255)) == 255


def test_fade_sample():
    assert fade_sample(BLACK) == 0xCCCCCC
    assert fade_sample(WHITE) == WHITE
    assert fade_sample(0x808080) == 0xE5E5E5


def test_clamp_boundaries():
    assert clamp(10, 50, 255) == 50
    assert clamp(900, 50, 255) == 255
    assert clamp(120, 50, 255) == 120


def test_blank_defaults_to_white():
    buffer = PixelBuffer.blank(4, 3)
    assert buffer.size == (4, 3)
    assert len(buffer) == 12
    assert all(buffer.get(x, y) == WHITE for x in range(4) for y in range(3))


def test_blank_with_fill():
    buffer = PixelBuffer.blank(2, 2, fill=BLACK)
    assert buffer.samples.tolist() == [[0, 0], [0, 0]]


def test_get_set_row_major():
    buffer = PixelBuffer(3, 2)
    buffer.set(2, 1, 0xABCDEF)
    assert buffer.get(2, 1) == 0xABCDEF
    assert buffer.samples.ravel()[1 * 3 + 2] == 0xABCDEF


@pytest.mark.parametrize("x, y", [(3, 0), (0, 2), (-1, 0), (5, 5)])
def test_out_of_bounds(x, y):
    buffer = PixelBuffer(3, 2)
    with pytest.raises(OutOfBoundsError):
        buffer.get(x, y)
    with pytest.raises(IndexError):
        buffer.set(x, y, WHITE)


def test_negative_dimensions_rejected():
    with pytest.raises(ValueError):
        PixelBuffer(-1, 2)


def test_mismatched_samples_rejected():
    with pytest.raises(ValueError):
        PixelBuffer(2, 2, np.zeros((3, 2), dtype=np.uint32))


def test_copy_is_independent():
    buffer = PixelBuffer.blank(2, 2)
    copy = buffer.copy()
    copy.set(0, 0, BLACK)
    assert buffer.get(0, 0) == WHITE
    assert buffer != copy


def test_image_conversion():
    buffer = PixelBuffer(2, 1)
    buffer.set(0, 0, 0xFF0000)
    buffer.set(1, 0, 0x00FF80)
    img = buffer.to_image()
    assert img.mode == "RGB"
    assert img.size == (2, 1)
    assert img.getpixel((0, 0)) == (255, 0, 0)
    assert img.getpixel((1, 0)) == (0, 255, 128)
    assert PixelBuffer.from_image(img) == buffer


def test_transforms_accept_scalars_and_arrays():
    samples = np.array([0x000000, 0xFFFFFF], dtype=np.uint32)
    assert fade_sample(samples).tolist() == [0xCCCCCC, 0xFFFFFF]
    assert pack_rgb(red(samples), green(samples), blue(samples)).tolist() == samples.tolist()
    assert fade_sample(0x000000) == 0xCCCCCC
