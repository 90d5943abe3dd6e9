"""CUE sheet commands."""

from __future__ import annotations

import click

# Exit codes
EXIT_SUCCESS = 0
EXIT_INVALID = 1
EXIT_NOTHING_FOUND = 2


@click.group("cue")
def cli() -> None:
    """CUE sheet commands.

    Commands for validating and inspecting the CUE sheets that
    describe single-file CD rips.
    """
    pass


# Import submodules to register their commands with the cli group
from cuekit.commands.cue import check as _check  # noqa: E402, F401
from cuekit.commands.cue import show as _show  # noqa: E402, F401
