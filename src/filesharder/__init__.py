"""
filesharder

Split large files into fixed-size, sequentially numbered shards and
reconstruct them by concatenation.

Usage:
    from filesharder import shard_file, reconstruct_file

    shard_file("disk.img", "shards/", max_size=1024 * 1024 * 1024)
    reconstruct_file("shards/", "disk.img")
"""

__version__ = "1.0.0"

from filesharder.config.sharder_config import SharderConfig
from filesharder.sharding.reconstructor import reconstruct_file
from filesharder.sharding.shard_writer import shard_file

__all__ = [
    "SharderConfig",
    "shard_file",
    "reconstruct_file",
    "__version__",
]
