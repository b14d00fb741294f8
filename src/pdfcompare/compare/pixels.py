"""Packed RGB pixel buffers and the per-sample transforms used by the differ."""

from __future__ import annotations

import numpy as np
from PIL import Image

from pdfcompare.errors import OutOfBoundsError

# Packed 24-bit samples (0xRRGGBB)
WHITE = 0xFFFFFF
BLACK = 0x000000

# A single sample or channel value, or a numpy array of them
Samples = int | np.ndarray


def red(sample: Samples) -> Samples:
    return (sample >> 16) & 0xFF


def green(sample: Samples) -> Samples:
    return (sample >> 8) & 0xFF


def blue(sample: Samples) -> Samples:
    return sample & 0xFF


def pack_rgb(r: Samples, g: Samples, b: Samples) -> Samples:
    """Pack three 8-bit channels into a 24-bit sample.

    Accepts plain ints or numpy arrays of matching shape.
    """
    return ((r & 0xFF) << 16) | ((g & 0xFF) << 8) | (b & 0xFF)


def clamp(value: int, lo: int, hi: int) -> int:
    return min(max(value, lo), hi)


def darkness(sample: Samples) -> Samples:
    """Return the ink density of a sample.

    Red is counted twice and blue not at all. The weighting decides which
    side of a difference gets highlighted, so it is kept as is.

    Args:
        sample: Packed RGB sample, or a numpy array of samples.

    Returns:
        Integer darkness (or an array of them).
    """
    return red(sample) + green(sample) + red(sample)


def fade(channel: Samples) -> Samples:
    """Push a channel value 80% of the way towards 255.

    Not idempotent: 255 stays 255, anything lower keeps creeping up on
    repeated application.
    """
    return channel + (255 - channel) * 4 // 5


def fade_sample(sample: Samples) -> Samples:
    """Fade each channel of a packed sample (or array of samples)."""
    return pack_rgb(fade(red(sample)), fade(green(sample)), fade(blue(sample)))


class PixelBuffer:
    """A 2-D grid of packed RGB samples.

    Samples are stored row-major in a ``(height, width)`` uint32 array, so
    the sample at ``(x, y)`` lives at ``samples[y, x]``.
    """

    __slots__ = ("width", "height", "samples")

    def __init__(self, width: int, height: int, samples: np.ndarray | None = None) -> None:
        if width < 0 or height < 0:
            raise ValueError(f"Buffer dimensions must be non-negative, got {width}x{height}")
        if samples is None:
            samples = np.zeros((height, width), dtype=np.uint32)
        elif samples.shape != (height, width):
            raise ValueError(
                f"Sample array shape {samples.shape} does not match {width}x{height}"
            )
        self.width = width
        self.height = height
        self.samples = samples.astype(np.uint32, copy=False)

    @classmethod
    def blank(cls, width: int, height: int, fill: int = WHITE) -> "PixelBuffer":
        """Create a buffer with every sample set to ``fill`` (white by default)."""
        buffer = cls(width, height)
        buffer.samples.fill(fill)
        return buffer

    @classmethod
    def from_array(cls, samples: np.ndarray) -> "PixelBuffer":
        """Wrap a ``(height, width)`` array of packed samples."""
        height, width = samples.shape
        return cls(width, height, samples)

    @classmethod
    def from_rgb_array(cls, rgb: np.ndarray) -> "PixelBuffer":
        """Pack a ``(height, width, 3)`` uint8 array into a buffer."""
        channels = rgb.astype(np.uint32)
        packed = pack_rgb(channels[..., 0], channels[..., 1], channels[..., 2])
        return cls.from_array(packed)

    @classmethod
    def from_image(cls, img: Image.Image) -> "PixelBuffer":
        return cls.from_rgb_array(np.asarray(img.convert("RGB")))

    @property
    def size(self) -> tuple[int, int]:
        return self.width, self.height

    def _check_bounds(self, x: int, y: int) -> None:
        if x < 0 or y < 0 or x >= self.width or y >= self.height:
            raise OutOfBoundsError(x, y, self.width, self.height)

    def get(self, x: int, y: int) -> int:
        self._check_bounds(x, y)
        return int(self.samples[y, x])

    def set(self, x: int, y: int, value: int) -> None:
        self._check_bounds(x, y)
        self.samples[y, x] = value & WHITE

    def copy(self) -> "PixelBuffer":
        return PixelBuffer(self.width, self.height, self.samples.copy())

    def to_rgb_array(self) -> np.ndarray:
        """Unpack into a ``(height, width, 3)`` uint8 array."""
        return np.stack(
            [red(self.samples), green(self.samples), blue(self.samples)],
            axis=-1,
        ).astype(np.uint8)

    def to_image(self) -> Image.Image:
        """Convert to an RGB Pillow image."""
        return Image.fromarray(self.to_rgb_array())

    def __len__(self) -> int:
        return self.width * self.height

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PixelBuffer):
            return NotImplemented
        return self.size == other.size and bool(np.array_equal(self.samples, other.samples))

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"PixelBuffer({self.width}x{self.height})"
