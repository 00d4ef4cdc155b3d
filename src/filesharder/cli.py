"""Command-line interface for filesharder."""

import logging
from pathlib import Path

import click
import yaml

from filesharder import __version__
from filesharder.config.sharder_config import PRESETS, SORT_ORDERS, SharderConfig
from filesharder.sharding.reconstructor import ShardReader
from filesharder.sharding.shard_writer import ShardWriter
from filesharder.utils.helpers import format_size, setup_logging

logger = logging.getLogger(__name__)


def _load_config(config_path: str | None, preset: str | None = None) -> SharderConfig:
    """Resolve configuration: config file over preset over defaults."""
    try:
        if config_path:
            config = SharderConfig.from_yaml(config_path)
        elif preset:
            config = SharderConfig.from_preset(preset)
        else:
            config = SharderConfig()
    except OSError as e:
        click.echo(f"Error: cannot read configuration: {e}", err=True)
        raise SystemExit(1) from e
    except (TypeError, ValueError, yaml.YAMLError) as e:
        click.echo(f"Error: invalid configuration: {e}", err=True)
        raise SystemExit(1) from e

    # --verbose wins over the configured level
    root = click.get_current_context().find_root()
    if config_path and not root.params.get("verbose"):
        setup_logging(config.log_level)

    return config


@click.group()
@click.version_option(__version__, prog_name="filesharder")
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output")
def main(verbose: bool):
    """filesharder - Split large files into shards and reconstruct them."""
    level = "DEBUG" if verbose else "INFO"
    setup_logging(level)


@main.command()
@click.option(
    "--input", "-i", "input_path", type=click.Path(), required=True, help="The source file to shard"
)
@click.option(
    "--output",
    "-o",
    "output_dir",
    type=click.Path(),
    required=True,
    help="The target directory to save shards",
)
@click.option(
    "--size",
    "-s",
    type=click.IntRange(min=1),
    default=None,
    help="Maximum shard size in bytes (default: 4294967296, i.e. 4 GiB)",
)
@click.option("--preset", type=click.Choice(PRESETS), default=None, help="Shard size preset")
@click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(exists=True, dir_okay=False),
    help="Configuration file path",
)
def shard(
    input_path: str,
    output_dir: str,
    size: int | None,
    preset: str | None,
    config_path: str | None,
):
    """Shard a file into smaller parts."""
    config = _load_config(config_path, preset)
    if size is not None:
        config.sharding.max_size = size

    click.echo(
        f"Sharding file {input_path} into directory {output_dir} "
        f"with max shard size {config.sharding.max_size} bytes"
    )

    writer = ShardWriter(output_dir, config.sharding)
    try:
        shards = writer.write(
            input_path, progress_callback=lambda p: click.echo(f"Created shard: {p}")
        )
    except OSError as e:
        click.echo(f"Error: {e}", err=True)
        raise SystemExit(1) from e

    total = sum(p.stat().st_size for p in shards)
    click.echo(f"[OK] Wrote {len(shards)} shard(s), {format_size(total)}")


@main.command()
@click.option(
    "--input",
    "-i",
    "input_dir",
    type=click.Path(),
    required=True,
    help="The directory containing shards",
)
@click.option(
    "--output",
    "-o",
    "output_path",
    type=click.Path(),
    required=True,
    help="The output file to reconstruct",
)
@click.option(
    "--order",
    type=click.Choice(SORT_ORDERS),
    default=None,
    help="Shard ordering (default: lexicographic)",
)
@click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(exists=True, dir_okay=False),
    help="Configuration file path",
)
def reconstruct(input_dir: str, output_path: str, order: str | None, config_path: str | None):
    """Reconstruct a file from its shards."""
    config = _load_config(config_path)
    if order is not None:
        config.reconstruction.order = order

    click.echo(f"Reconstructing file from shards in directory {input_dir} to {output_path}")

    reader = ShardReader(input_dir, prefix=config.sharding.prefix, config=config.reconstruction)
    try:
        shards = reader.reconstruct(
            output_path, progress_callback=lambda p: click.echo(f"Processed shard: {p}")
        )
    except OSError as e:
        click.echo(f"Error: {e}", err=True)
        raise SystemExit(1) from e

    size = Path(output_path).stat().st_size
    click.echo(f"[OK] Reconstructed {output_path} from {len(shards)} shard(s), {format_size(size)}")


if __name__ == "__main__":
    main()
