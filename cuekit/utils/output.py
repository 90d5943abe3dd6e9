"""Rich console output helpers for cuekit."""

from __future__ import annotations

from typing import Any

from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.theme import Theme

# Module-level verbosity flags (set by cli.py after argument parsing)
_verbose_enabled: bool = False


def set_verbosity(*, verbose: bool = False, debug: bool = False) -> None:
    """Configure module-level verbosity flags.

    Called from the CLI entry point after argument parsing.
    """
    global _verbose_enabled
    _verbose_enabled = verbose or debug  # debug implies verbose


def set_color(enabled: bool) -> None:
    """Enable or disable color on both console instances."""
    console.no_color = not enabled
    error_console.no_color = not enabled


# Custom theme for cuekit
THEME = Theme(
    {
        "info": "cyan",
        "warning": "yellow",
        "error": "bold red",
        "success": "bold green",
        "path": "blue underline",
        "cue.ok": "green",
        "cue.failed": "red",
        "track.number": "bold",
        "track.title": "italic",
        "track.index": "magenta",
    }
)

# Global console instances
console = Console(theme=THEME, stderr=False)
error_console = Console(theme=THEME, stderr=True)


def info(message: str) -> None:
    """Print an info message."""
    console.print(f"[info]{message}[/info]")


def warning(message: str) -> None:
    """Print a warning message to stderr."""
    error_console.print(f"[warning]Warning:[/warning] {message}")


def error(message: str, hint: str | None = None) -> None:
    """Print an error message to stderr.

    Args:
        message: The error message.
        hint: Optional hint for resolution.
    """
    error_console.print(f"[error]Error:[/error] {message}")
    if hint:
        error_console.print(f"  [info]Hint:[/info] {hint}")


def success(message: str) -> None:
    """Print a success message."""
    console.print(f"[success]{message}[/success]")


def verbose(message: str) -> None:
    """Print a message only when verbose mode is enabled."""
    if _verbose_enabled:
        console.print(f"[info]{message}[/info]")


def create_table(title: str | None = None, **kwargs: Any) -> Table:
    """Create a styled table.

    Args:
        title: Optional table title.
        **kwargs: Additional Table arguments.

    Returns:
        Rich Table instance.
    """
    return Table(title=title, **kwargs)


def print_path(path: str, prefix: str = "") -> None:
    """Print a path with styling.

    Args:
        path: File or directory path.
        prefix: Optional prefix.
    """
    if prefix:
        console.print(f"{prefix} [path]{path}[/path]")
    else:
        console.print(f"[path]{path}[/path]")


def report_ok(path: str, detail: str = "") -> None:
    """Print a passed cue sheet line.

    Paths are printed literally and never wrapped.
    """
    suffix = f" {escape(detail)}" if detail else ""
    console.print(f"[cue.ok]OK[/cue.ok]     [path]{escape(path)}[/path]{suffix}", soft_wrap=True)


def report_failure(path: str, message: str) -> None:
    """Print a failed cue sheet and its indented, multi-line error to stderr."""
    error_console.print(
        f"[cue.failed]FAILED[/cue.failed] [path]{escape(path)}[/path]", soft_wrap=True
    )
    for line in message.splitlines():
        error_console.print(f"  {escape(line)}", soft_wrap=True, highlight=False)
