"""Visual page-by-page comparison of PDF documents."""

__version__ = "0.3.0"
