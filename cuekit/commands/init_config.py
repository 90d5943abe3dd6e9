"""Initialize configuration file for cuekit."""

from __future__ import annotations

from importlib import resources
from pathlib import Path

import click

from cuekit.cli import Context, pass_context
from cuekit.config import Config, get_default_config_path
from cuekit.utils.fileops import secure_atomic_write
from cuekit.utils.output import error, info, success


def _load_example_config() -> str:
    """Load the example configuration from package data."""
    return resources.files("cuekit").joinpath("config.example.toml").read_text()


@click.command("init-config")
@click.option(
    "--force",
    "-f",
    is_flag=True,
    default=False,
    help="Overwrite existing config file",
)
@click.option(
    "--output",
    "-o",
    type=click.Path(path_type=Path),
    default=None,
    help="Output path for config file (default: ~/.config/cuekit/config.toml)",
)
@click.option(
    "--from-current",
    is_flag=True,
    default=False,
    help="Write the currently loaded settings instead of the commented example",
)
@pass_context
def cli(ctx: Context, force: bool, output: Path | None, from_current: bool) -> None:
    """Create a new configuration file with default settings.

    The generated file documents every available option.

    Examples:

    \b
      # Create config at default location
      cuekit init-config

    \b
      # Overwrite an existing config at a custom location
      cuekit init-config --output ./cuekit.toml --force

    \b
      # Snapshot the active settings (e.g. from --config) to a new file
      cuekit --config old.toml init-config --from-current -o new.toml
    """
    config_path = output if output is not None else get_default_config_path()
    config_path = config_path.expanduser().resolve()

    if config_path.exists() and not force:
        error(
            f"Config file already exists: {config_path}",
            hint="Use --force to overwrite",
        )
        raise SystemExit(1)

    try:
        if from_current:
            config = ctx.config if ctx.config is not None else Config()
            config.save(config_path)
        else:
            secure_atomic_write(config_path, _load_example_config())
    except OSError as e:
        error(f"Failed to write config file: {e}")
        raise SystemExit(1)

    success(f"Created config file: {config_path}")
    if not ctx.quiet:
        info("Edit this file to customize your settings.")
