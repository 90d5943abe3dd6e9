"""CUE show command: prints the album metadata and tracks of one sheet."""

from __future__ import annotations

import sys
from pathlib import Path

import click
from rich.markup import escape

from cuekit.commands.cue import EXIT_INVALID, cli
from cuekit.cue import CueSheet, parse_file
from cuekit.exceptions import CueError
from cuekit.utils.output import console, create_table, print_path, report_failure


def render_sheet(sheet: CueSheet) -> None:
    """Print album fields followed by a table of tracks."""
    for label, value in (
        ("Performer", sheet.performer),
        ("Title", sheet.title),
        ("Genre", sheet.genre),
        ("Date", sheet.date),
    ):
        if value is not None:
            console.print(f"{label}: {escape(value)}", soft_wrap=True)
    print_path(escape(sheet.file_name or ""), prefix=f"File ({escape(sheet.format or '')}):")

    table = create_table(title=None)
    table.add_column("#", style="track.number", justify="right")
    table.add_column("Type")
    table.add_column("Title", style="track.title")
    table.add_column("Index 01", style="track.index")
    table.add_column("Start sample", justify="right")

    for track in sheet.tracks:
        index = track.index01
        table.add_row(
            f"{track.number:02d}",
            escape(track.type or ""),
            escape(track.title or ""),
            str(index) if index is not None else "-",
            str(track.start.samples),
        )
    console.print(table)


@cli.command("show")
@click.argument("cue_file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
def show(cue_file: Path) -> None:
    """Show the album metadata and track list of CUE_FILE."""
    try:
        sheet = parse_file(cue_file)
    except CueError as e:
        report_failure(str(cue_file), str(e))
        sys.exit(EXIT_INVALID)

    render_sheet(sheet)
