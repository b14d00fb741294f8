"""Exceptions raised by pdfcompare."""

__all__ = ["PdfCompareError", "OutOfBoundsError", "RenderError", "ConfigError"]


class PdfCompareError(Exception):
    """Base class for all pdfcompare errors."""


class OutOfBoundsError(PdfCompareError, IndexError):
    """Raised when a pixel buffer is indexed outside its dimensions."""

    def __init__(self, x: int, y: int, width: int, height: int) -> None:
        super().__init__(f"Pixel ({x}, {y}) is outside a {width}x{height} buffer")
        self.x = x
        self.y = y
        self.width = width
        self.height = height


class RenderError(PdfCompareError, RuntimeError):
    """Raised when a document or one of its pages cannot be rendered."""


class ConfigError(PdfCompareError, ValueError):
    """Raised for invalid configuration values."""
