"""Sharder configuration module."""

from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Any, Literal

import yaml

DEFAULT_MAX_SIZE = 4 * 1024 * 1024 * 1024
DEFAULT_PREFIX = "shard_"
DEFAULT_INDEX_WIDTH = 4

SORT_ORDERS = ("lexicographic", "numeric")
LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


def _require_int(name: str, value: Any, minimum: int) -> None:
    # bool is an int subclass; `max_size: true` is a typo, not a size
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"{name} must be an integer, got {value!r}")
    if value < minimum:
        raise ValueError(f"{name} must be at least {minimum}, got {value}")


@dataclass
class ShardConfig:
    """Shard layout configuration."""

    max_size: int = DEFAULT_MAX_SIZE
    prefix: str = DEFAULT_PREFIX
    index_width: int = DEFAULT_INDEX_WIDTH

    def __post_init__(self):
        _require_int("max_size", self.max_size, 1)
        _require_int("index_width", self.index_width, 1)
        if not isinstance(self.prefix, str) or not self.prefix:
            raise ValueError(f"prefix must be a non-empty string, got {self.prefix!r}")

    def shard_name(self, index: int) -> str:
        """Return the file name for the shard at ``index``."""
        return f"{self.prefix}{index:0{self.index_width}d}"

    @property
    def max_shards(self) -> int:
        """Number of shards whose names still sort in numeric order."""
        return 10**self.index_width


@dataclass
class ReconstructConfig:
    """Reconstruction configuration."""

    order: Literal["lexicographic", "numeric"] = "lexicographic"

    def __post_init__(self):
        if self.order not in SORT_ORDERS:
            raise ValueError(f"Unknown order: {self.order}. Available: {list(SORT_ORDERS)}")


@dataclass
class SharderConfig:
    """Main configuration."""

    log_level: str = "INFO"

    # Sub-configs
    sharding: ShardConfig = field(default_factory=ShardConfig)
    reconstruction: ReconstructConfig = field(default_factory=ReconstructConfig)

    def __post_init__(self):
        if not isinstance(self.log_level, str) or self.log_level.upper() not in LOG_LEVELS:
            raise ValueError(
                f"Unknown log_level: {self.log_level!r}. Available: {list(LOG_LEVELS)}"
            )

    @classmethod
    def from_yaml(cls, path: str | Path) -> "SharderConfig":
        """Load configuration from a YAML file. An empty file gives the defaults."""
        data = yaml.safe_load(Path(path).read_text())
        if data is None:
            return cls()
        if not isinstance(data, dict):
            raise ValueError(f"{path}: expected a mapping at the top level")
        return cls.from_dict(data)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "SharderConfig":
        """Create configuration from dictionary."""
        data = dict(data)
        shard_data = data.pop("sharding", None) or {}
        reconstruct_data = data.pop("reconstruction", None) or {}

        return cls(
            **data,
            sharding=ShardConfig(**shard_data),
            reconstruction=ReconstructConfig(**reconstruct_data),
        )

    @classmethod
    def from_preset(cls, preset: str) -> "SharderConfig":
        """Create configuration from preset."""
        presets = {
            "default": cls(),
            # FAT32 caps a single file at 4 GiB minus one byte
            "fat32": cls(sharding=ShardConfig(max_size=DEFAULT_MAX_SIZE - 1)),
            "dvd": cls(sharding=ShardConfig(max_size=4_700_000_000)),
            "cd": cls(sharding=ShardConfig(max_size=700 * 1024 * 1024)),
        }

        if preset not in presets:
            raise ValueError(f"Unknown preset: {preset}. Available: {list(presets.keys())}")

        return presets[preset]

    def to_yaml(self, path: str | Path) -> None:
        """Write the configuration as YAML, creating parent directories."""
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(yaml.safe_dump(self.to_dict(), sort_keys=False))

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


PRESETS = ("default", "fat32", "dvd", "cd")
