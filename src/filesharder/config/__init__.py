"""Configuration module."""

from filesharder.config.sharder_config import (
    DEFAULT_INDEX_WIDTH,
    DEFAULT_MAX_SIZE,
    DEFAULT_PREFIX,
    LOG_LEVELS,
    PRESETS,
    SORT_ORDERS,
    ReconstructConfig,
    ShardConfig,
    SharderConfig,
)

__all__ = [
    "SharderConfig",
    "ShardConfig",
    "ReconstructConfig",
    "DEFAULT_MAX_SIZE",
    "DEFAULT_PREFIX",
    "DEFAULT_INDEX_WIDTH",
    "LOG_LEVELS",
    "PRESETS",
    "SORT_ORDERS",
]
