"""Set-once field assignment."""

from __future__ import annotations

from typing import TypeVar

from cuekit.exceptions import FieldAlreadySetError

T = TypeVar("T")

# Characters trimmed from lines and values: space, double quote, tab, newline.
TRIM_CHARS = ' "\t\n'


def assign_once(current: T | None, candidate: T | None) -> T | None:
    """Return the new value for a field that may only be written once.

    ``None`` is the only unset state. Assigning ``None`` to an unset field
    leaves it unset.

    Raises:
        FieldAlreadySetError: If *current* already holds a value, even when
            it equals *candidate*.
    """
    if current is not None:
        raise FieldAlreadySetError(current)
    return candidate


def text_value(tokens: list[str]) -> str | None:
    """Join parameter tokens with single spaces and trim quotes/whitespace.

    Returns None for a value that is empty after trimming.
    """
    value = " ".join(tokens).strip(TRIM_CHARS)
    return value or None
