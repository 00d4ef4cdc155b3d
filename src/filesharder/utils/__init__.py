"""Utils module."""

from filesharder.utils.helpers import format_size, setup_logging

__all__ = [
    "setup_logging",
    "format_size",
]
