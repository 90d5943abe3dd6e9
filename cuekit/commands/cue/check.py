"""CUE check command: parses cue sheets and reports every invalid one."""

from __future__ import annotations

import os
import sys
from pathlib import Path

import click

from cuekit.cli import Context, pass_context
from cuekit.commands.cue import EXIT_INVALID, EXIT_NOTHING_FOUND, EXIT_SUCCESS, cli
from cuekit.config import Config
from cuekit.cue import ParseSummary, parse_file
from cuekit.exceptions import CueError
from cuekit.utils.output import info, report_failure, report_ok, verbose, warning


def _matches(path: Path, suffixes: list[str]) -> bool:
    return path.suffix.lower() in suffixes


def collect_cue_files(paths: tuple[Path, ...], recursive: bool, suffixes: list[str]) -> list[Path]:
    """Expand PATHS into the list of cue sheets to check.

    Files named explicitly are always included. Directories contribute
    the files whose suffix is in *suffixes*, walking subdirectories only
    when *recursive* is set. Duplicates are dropped, order is preserved.
    """
    found: list[Path] = []
    seen: set[Path] = set()

    def add(candidate: Path) -> None:
        key = candidate.resolve()
        if key not in seen:
            seen.add(key)
            found.append(candidate)

    for path in paths:
        if path.is_file():
            add(path)
            continue
        if not path.is_dir():
            warning(f"Not a file or directory: {path}")
            continue
        if recursive:
            for root, dirs, files in os.walk(path):
                dirs.sort()
                for name in sorted(files):
                    candidate = Path(root) / name
                    if _matches(candidate, suffixes):
                        add(candidate)
        else:
            for candidate in sorted(path.iterdir()):
                if candidate.is_file() and _matches(candidate, suffixes):
                    add(candidate)

    return found


@cli.command("check")
@click.argument(
    "paths", nargs=-1, required=True, type=click.Path(exists=True, path_type=Path)
)
@click.option(
    "--recursive/--no-recursive",
    "-r",
    default=None,
    help="Walk directory trees to find cue sheets (default: from config).",
)
@click.option(
    "--failures-only",
    is_flag=True,
    default=False,
    help="Only report cue sheets that fail to parse.",
)
@pass_context
def check(
    ctx: Context,
    paths: tuple[Path, ...],
    recursive: bool | None,
    failures_only: bool,
) -> None:
    """Validate cue sheets.

    Parses each file in PATHS, or each cue sheet found in PATHS that are
    directories, and reports the exact line and reason of every failure.

    Exits with 0 when every sheet is valid, 1 when any sheet is invalid
    and 2 when no cue sheet was found.
    """
    config = ctx.config or Config()
    if recursive is None:
        recursive = config.recursive

    cue_files = collect_cue_files(paths, recursive, config.suffixes)
    if not cue_files:
        info("No cue sheets found.")
        sys.exit(EXIT_NOTHING_FOUND)

    ok_count = 0
    failed_count = 0

    for cue_path in cue_files:
        summaries: list[ParseSummary] = []
        try:
            parse_file(cue_path, observer=summaries.append)
        except CueError as e:
            failed_count += 1
            report_failure(str(cue_path), str(e))
            continue

        ok_count += 1
        summary = summaries[0]
        verbose(f"{cue_path}: {summary.lines} lines, {summary.file_name} ({summary.format})")
        if not (failures_only or ctx.quiet):
            report_ok(str(cue_path), f"({summary.track_count} tracks)")

    if not ctx.quiet:
        info(f"\nChecked {len(cue_files)} cue sheet(s): {ok_count} ok, {failed_count} failed")

    if failed_count > 0:
        sys.exit(EXIT_INVALID)
    sys.exit(EXIT_SUCCESS)
