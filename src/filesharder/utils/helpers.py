"""Utility functions and helpers."""

import logging
import sys

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

_SIZE_UNITS = ("B", "KiB", "MiB", "GiB", "TiB", "PiB")


def setup_logging(level: str | int = "INFO", format_str: str = LOG_FORMAT) -> logging.Logger:
    """Send log records to stdout at ``level``.

    Handlers installed by an earlier call are replaced, so the CLI can apply
    the level from a config file after the group has already configured
    logging.
    """
    if isinstance(level, str):
        level = level.upper()

    logging.basicConfig(
        level=level,
        format=format_str,
        handlers=[logging.StreamHandler(sys.stdout)],
        force=True,
    )
    return logging.getLogger("filesharder")


def format_size(size_bytes: int) -> str:
    """Render a byte count with binary units, e.g. ``4.00 GiB``."""
    size = float(size_bytes)
    unit = 0
    while abs(size) >= 1024.0 and unit < len(_SIZE_UNITS) - 1:
        size /= 1024.0
        unit += 1
    return f"{size:.2f} {_SIZE_UNITS[unit]}"
