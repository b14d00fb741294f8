"""Configuration file management."""

import json
import os
from pathlib import Path

from pdfcompare.errors import ConfigError
from pdfcompare.render import DEFAULT_DPI, validate_dpi

DEFAULT_OUTPUT_DIR = "reports"

DEFAULTS = {
    "dpi": DEFAULT_DPI,
    "output_dir": DEFAULT_OUTPUT_DIR,
}


def get_config_dir() -> Path:
    """Get the configuration directory.

    ``~/.pdfcompare`` unless the ``PDFCOMPARE_HOME`` environment variable
    points elsewhere.
    """
    override = os.environ.get("PDFCOMPARE_HOME")
    if override:
        return Path(override).expanduser()
    return Path.home() / ".pdfcompare"


def get_config_file() -> Path:
    return get_config_dir() / "config.json"


def get_config() -> dict:
    """Load the configuration from disk.

    Returns:
        Configuration dict with keys:
        - dpi: Render resolution in dots per inch
        - output_dir: Directory reports are written to
        Missing keys, or an unreadable file, fall back to defaults.
    """
    config = dict(DEFAULTS)
    config_file = get_config_file()
    if not config_file.exists():
        return config

    try:
        stored = json.loads(config_file.read_text())
    except (json.JSONDecodeError, OSError):
        return config

    if isinstance(stored, dict):
        config.update({key: value for key, value in stored.items() if key in DEFAULTS})
    return config


def save_config(config: dict) -> None:
    """Save configuration to disk.

    Args:
        config: Configuration dict to save.
    """
    config_dir = get_config_dir()
    config_dir.mkdir(parents=True, exist_ok=True)
    get_config_file().write_text(json.dumps(config, indent=2))


def get_dpi() -> int:
    """Get the configured render DPI.

    Raises:
        ConfigError: If the stored value is not a valid DPI.
    """
    value = get_config()["dpi"]
    if not isinstance(value, int) or isinstance(value, bool):
        raise ConfigError(f"Configured dpi must be an integer, got {value!r}")
    return validate_dpi(value)


def get_output_dir() -> Path:
    """Get the configured output directory, relative to the working directory."""
    return Path(get_config()["output_dir"]).expanduser()


def set_dpi(dpi: int) -> None:
    """Set the render DPI.

    Raises:
        ConfigError: If DPI is out of range.
    """
    config = get_config()
    config["dpi"] = validate_dpi(dpi)
    save_config(config)


def set_output_dir(path: Path) -> None:
    config = get_config()
    config["output_dir"] = str(path)
    save_config(config)


def reset_config() -> None:
    """Restore all settings to their defaults."""
    save_config(dict(DEFAULTS))
