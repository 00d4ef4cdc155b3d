"""Sharding module for splitting a file into fixed-size shards."""

import logging
import os
from collections.abc import Callable
from pathlib import Path

from filesharder.config.sharder_config import (
    DEFAULT_INDEX_WIDTH,
    DEFAULT_MAX_SIZE,
    DEFAULT_PREFIX,
    ShardConfig,
)

logger = logging.getLogger(__name__)

ProgressCallback = Callable[[Path], None]


class ShardWriter:
    """Split a source file into sequentially numbered shard files."""

    def __init__(self, target_dir: str | Path, config: ShardConfig | None = None):
        self.target_dir = Path(target_dir)
        self.config = config or ShardConfig()

    def _buffer_size(self, f) -> int:
        """Size the reusable buffer to max_size, capped at the source size."""
        try:
            source_size = os.fstat(f.fileno()).st_size
        except OSError:
            return self.config.max_size
        # Pipes and character devices report 0
        if source_size <= 0:
            return self.config.max_size
        return max(1, min(self.config.max_size, source_size))

    @staticmethod
    def _fill(f, view: memoryview) -> int:
        """Read into ``view`` until it is full or the source is exhausted."""
        filled = 0
        while filled < len(view):
            n = f.readinto(view[filled:])
            if not n:
                break
            filled += n
        return filled

    def write(
        self,
        source: str | Path,
        progress_callback: ProgressCallback | None = None,
    ) -> list[Path]:
        """Write shards of ``source`` into the target directory.

        Shards are named ``<prefix><index>`` with the index zero-padded to
        ``index_width`` digits, starting at 0. Every shard holds exactly
        ``max_size`` bytes except possibly the last one. An empty source
        produces no shards.

        Any read or write error propagates unchanged. Shards written before
        the error are left on disk.

        Returns:
            Paths of the written shards, in index order.
        """
        source = Path(source)
        written: list[Path] = []

        with open(source, "rb") as f:
            self.target_dir.mkdir(parents=True, exist_ok=True)

            buffer = bytearray(self._buffer_size(f))
            view = memoryview(buffer)
            part = 0

            while True:
                bytes_read = self._fill(f, view)
                if bytes_read == 0:
                    break

                if part == self.config.max_shards:
                    logger.warning(
                        f"Shard index {part} exceeds {self.config.index_width}-digit padding; "
                        "shard names past this point no longer sort in numeric order"
                    )

                shard_path = self.target_dir / self.config.shard_name(part)
                with open(shard_path, "wb") as shard_file:
                    shard_file.write(view[:bytes_read])

                logger.debug(f"Wrote shard {shard_path.name}: {bytes_read} bytes")
                written.append(shard_path)
                if progress_callback:
                    progress_callback(shard_path)
                part += 1

        logger.info(f"Split {source} into {len(written)} shard(s) in {self.target_dir}")
        return written


def shard_file(
    source: str | Path,
    target_dir: str | Path,
    max_size: int = DEFAULT_MAX_SIZE,
    prefix: str = DEFAULT_PREFIX,
    index_width: int = DEFAULT_INDEX_WIDTH,
    progress_callback: ProgressCallback | None = None,
) -> list[Path]:
    """Split ``source`` into shards of at most ``max_size`` bytes in ``target_dir``."""
    config = ShardConfig(max_size=max_size, prefix=prefix, index_width=index_width)
    return ShardWriter(target_dir, config).write(source, progress_callback)
