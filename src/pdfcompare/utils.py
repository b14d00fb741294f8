"""Utility functions for pdfcompare."""

import hashlib
import re
from pathlib import Path


def _safe_name(name: str, fallback: str) -> str:
    return re.sub(r"[^A-Za-z0-9._-]+", "_", name).strip("_") or fallback


def make_report_name(expected: Path, actual: Path) -> str:
    """Build a filesystem-safe directory name for a comparison's outputs.

    Combines both file stems with a short hash of the full paths so that
    files sharing a stem in different folders do not collide.
    """
    expected_stem = _safe_name(expected.stem, "expected")
    actual_stem = _safe_name(actual.stem, "actual")
    path_hash = hashlib.md5(f"{expected}\0{actual}".encode()).hexdigest()[:6]
    if expected_stem == actual_stem:
        return f"{expected_stem}__{path_hash}"
    return f"{expected_stem}__vs__{actual_stem}__{path_hash}"
