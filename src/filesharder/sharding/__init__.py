"""Sharding module."""

from filesharder.sharding.reconstructor import ShardReader, reconstruct_file, sort_shards
from filesharder.sharding.shard_writer import ShardWriter, shard_file

__all__ = [
    "ShardWriter",
    "ShardReader",
    "shard_file",
    "reconstruct_file",
    "sort_shards",
]
