"""Utility modules for cuekit."""

from cuekit.utils.output import (
    console,
    error,
    info,
    success,
    warning,
)

__all__ = [
    "console",
    "error",
    "info",
    "success",
    "warning",
]
