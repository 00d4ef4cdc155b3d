"""Reconstruct a file by concatenating its shards."""

import logging
import os
from pathlib import Path

from filesharder.config.sharder_config import DEFAULT_PREFIX, SORT_ORDERS, ReconstructConfig
from filesharder.sharding.shard_writer import ProgressCallback

logger = logging.getLogger(__name__)


def _numeric_key(prefix: str):
    def key(path: Path) -> tuple:
        suffix = path.name[len(prefix) :]
        if suffix.isdecimal():
            return (0, int(suffix), path.name)
        return (1, 0, path.name)

    return key


def sort_shards(
    paths: list[Path], prefix: str = DEFAULT_PREFIX, order: str = "lexicographic"
) -> list[Path]:
    """Sort shard paths by file name.

    ``lexicographic`` compares names as strings and is only correct while the
    indices fit the zero padding. ``numeric`` compares the integer after the
    prefix; names without a numeric suffix go last.
    """
    if order == "lexicographic":
        return sorted(paths, key=lambda p: p.name)
    if order == "numeric":
        return sorted(paths, key=_numeric_key(prefix))
    raise ValueError(f"Unknown order: {order}. Available: {list(SORT_ORDERS)}")


class ShardReader:
    """Read a shard set back from a directory."""

    def __init__(
        self,
        shard_dir: str | Path,
        prefix: str = DEFAULT_PREFIX,
        config: ReconstructConfig | None = None,
    ):
        self.shard_dir = Path(shard_dir)
        self.prefix = prefix
        self.config = config or ReconstructConfig()

    def _scan(self) -> list[Path]:
        """List entries whose name starts with the prefix.

        A missing directory yields nothing. Entries whose type cannot be
        determined, and subdirectories, are skipped.
        """
        try:
            it = os.scandir(self.shard_dir)
        except FileNotFoundError:
            logger.debug(f"Shard directory {self.shard_dir} does not exist")
            return []

        found = []
        with it:
            for entry in it:
                if not entry.name.startswith(self.prefix):
                    continue
                try:
                    if entry.is_dir():
                        logger.debug(f"Skipping directory {entry.path}")
                        continue
                except OSError as e:
                    logger.debug(f"Skipping unreadable entry {entry.path}: {e}")
                    continue
                found.append(self.shard_dir / entry.name)
        return found

    def list_shards(self, exclude: str | Path | None = None) -> list[Path]:
        """Return matching shard paths in reconstruction order."""
        shards = self._scan()
        if exclude is not None:
            excluded = Path(exclude).resolve()
            shards = [p for p in shards if p.resolve() != excluded]
        return sort_shards(shards, self.prefix, self.config.order)

    def reconstruct(
        self,
        output: str | Path,
        progress_callback: ProgressCallback | None = None,
    ) -> list[Path]:
        """Concatenate all shards into ``output``.

        The output is created or truncated before the directory is listed.
        Each shard is read whole and appended. The first error aborts the
        run and leaves the partial output in place.

        Returns:
            Paths of the shards consumed, in order.
        """
        output = Path(output)
        processed: list[Path] = []
        total_bytes = 0

        with open(output, "wb") as output_file:
            for shard_path in self.list_shards(exclude=output):
                with open(shard_path, "rb") as shard_file:
                    data = shard_file.read()
                output_file.write(data)
                total_bytes += len(data)

                logger.debug(f"Appended shard {shard_path.name}: {len(data)} bytes")
                processed.append(shard_path)
                if progress_callback:
                    progress_callback(shard_path)

        logger.info(
            f"Reconstructed {output} from {len(processed)} shard(s) ({total_bytes} bytes)"
        )
        return processed


def reconstruct_file(
    shard_dir: str | Path,
    output: str | Path,
    prefix: str = DEFAULT_PREFIX,
    order: str = "lexicographic",
    progress_callback: ProgressCallback | None = None,
) -> list[Path]:
    """Concatenate the shards in ``shard_dir`` into ``output``."""
    reader = ShardReader(shard_dir, prefix=prefix, config=ReconstructConfig(order=order))
    return reader.reconstruct(output, progress_callback)
