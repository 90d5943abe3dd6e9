"""Command-line interface for cuekit."""

from __future__ import annotations

import logging
import os
from pathlib import Path

import click

from cuekit import __version__
from cuekit.config import Config, load_config
from cuekit.utils.output import (
    error,
    set_color,
    set_verbosity,
    warning,
)


class Context:
    """Shared context for all commands."""

    def __init__(self) -> None:
        self.config: Config | None = None
        self.verbose: bool = False
        self.debug: bool = False
        self.quiet: bool = False


pass_context = click.make_pass_decorator(Context, ensure=True)


@click.group()
@click.option(
    "--config",
    "-c",
    type=click.Path(exists=False, path_type=Path),
    help="Path to config file (default: ~/.config/cuekit/config.toml)",
)
@click.option(
    "--no-color",
    is_flag=True,
    default=False,
    help="Disable colored output",
)
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    default=False,
    help="Enable verbose output",
)
@click.option(
    "--debug",
    is_flag=True,
    default=False,
    help="Enable debug output and parser logging (implies --verbose)",
)
@click.option(
    "--quiet",
    "-q",
    is_flag=True,
    default=False,
    help="Suppress non-error output",
)
@click.version_option(version=__version__, prog_name="cuekit")
@click.pass_context
def cli(
    ctx: click.Context,
    config: Path | None,
    no_color: bool,
    verbose: bool,
    debug: bool,
    quiet: bool,
) -> None:
    """cuekit: Parse and validate CUE sheets.

    Reads CUE sheets describing how a single audio image is split into
    tracks, enforces their structure and reports the exact line of any
    problem.

    Configuration is loaded from ~/.config/cuekit/config.toml by default.
    Use --config to specify an alternative configuration file.

    Examples:

        # Validate every cue sheet below a directory
        cuekit cue check -r ~/Music

        # Show the tracks of one cue sheet
        cuekit cue show album.cue
    """
    # Initialize context
    ctx.ensure_object(Context)
    app_ctx = ctx.obj
    app_ctx.verbose = verbose or debug
    app_ctx.debug = debug
    app_ctx.quiet = quiet

    # Configure module-level verbosity for output helpers
    set_verbosity(verbose=verbose, debug=debug)

    # The library only emits records; the CLI decides where they go.
    if debug:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(levelname)s %(name)s: %(message)s",
        )

    # Configure color output: disabled by --no-color, NO_COLOR env, or config
    disable_color = no_color or os.environ.get("NO_COLOR") is not None

    if disable_color:
        set_color(False)

    # Load configuration
    try:
        loaded_config, warnings = load_config(config)
        app_ctx.config = loaded_config

        # Apply config settings
        if not disable_color and not loaded_config.colored_output:
            set_color(False)

        # Show warnings only when asked for; a missing config is normal
        if verbose and not quiet:
            for warn in warnings:
                warning(warn)

    except Exception as e:
        error(str(e))
        ctx.exit(1)


@cli.command("help")
@click.argument("command", required=False, nargs=-1)
@click.pass_context
def help_cmd(ctx: click.Context, command: tuple[str, ...]) -> None:
    """Show help for a command."""
    group = cli
    # Resolve subcommand chain
    for name in command:
        cmd = group.get_command(ctx, name)
        if cmd is None:
            error(f"Unknown command: {name}")
            ctx.exit(1)
            return
        if isinstance(cmd, click.Group):
            group = cmd
        else:
            click.echo(cmd.get_help(ctx))
            return
    # Print group help
    click.echo(group.get_help(ctx))


def register_commands() -> None:
    """Register all commands from the commands package."""
    from cuekit.commands import discover_commands

    for command in discover_commands():
        cli.add_command(command)


# Register commands on import
register_commands()
