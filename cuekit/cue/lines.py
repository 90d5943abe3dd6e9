"""Line normalization for CUE streams."""

from __future__ import annotations

import codecs
from typing import IO, TYPE_CHECKING

from cuekit.cue.fields import TRIM_CHARS
from cuekit.exceptions import CueReadError

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

    CueSource = IO[str] | IO[bytes] | Iterable[str]

BOM = "\ufeff"


def normalize_line(line: str) -> str:
    """Strip the line terminator and trim surrounding quotes and whitespace."""
    return line.rstrip("\n").rstrip("\r").strip(TRIM_CHARS)


def _decoded(source: CueSource) -> Iterator[str]:
    """Yield text lines from a text or binary stream.

    Binary streams are decoded incrementally as UTF-8.
    """
    decoder = None
    for raw in source:
        if isinstance(raw, bytes):
            if decoder is None:
                decoder = codecs.getincrementaldecoder("utf-8")()
            try:
                yield decoder.decode(raw)
            except UnicodeDecodeError as e:
                raise CueReadError(f"CUE stream is not valid UTF-8: {e}") from e
        else:
            yield raw
    if decoder is not None:
        try:
            decoder.decode(b"", final=True)
        except UnicodeDecodeError as e:
            raise CueReadError(f"CUE stream is not valid UTF-8: {e}") from e


class CueLineReader:
    """Single-pass iterator over the meaningful lines of a CUE stream.

    Yields ``(line_number, text)`` pairs. A byte-order mark at the very
    start of the stream is dropped. Blank lines and bare ``REM`` lines are
    skipped but still counted, so line numbers match the physical file.
    After iteration ``line_count`` holds the number of physical lines read.
    """

    def __init__(self, source: CueSource) -> None:
        self._source = source
        self._consumed = False
        self.line_count = 0

    def __iter__(self) -> Iterator[tuple[int, str]]:
        if self._consumed:
            return
        self._consumed = True
        for line in _decoded(self._source):
            if self.line_count == 0 and line.startswith(BOM):
                line = line[len(BOM) :]
            self.line_count += 1
            text = normalize_line(line)
            if not text or text == "REM":
                continue
            yield self.line_count, text


def normalized_lines(source: CueSource) -> Iterator[tuple[int, str]]:
    """Shortcut for iterating a CueLineReader."""
    return iter(CueLineReader(source))
