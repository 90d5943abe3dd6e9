"""CUE sheet parser.

Reads a CUE stream line by line, dispatches each line to the handler of
its command and validates the finished document. Every scalar field may
be written once; tracks must be numbered 1, 2, 3 ... and their INDEX 01
points must increase strictly. Errors abort the parse and carry the
line number, the line text and the command as context.
"""

from __future__ import annotations

import io
import logging
import re
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

from cuekit.cue.commands import CueCommand, RemCommand
from cuekit.cue.fields import assign_once, text_value
from cuekit.cue.lines import CueLineReader
from cuekit.cue.models import CueSheet, CueTrack, IndexPoint, ParseSummary
from cuekit.cue.timestamp import parse_timestamp
from cuekit.cue.validator import validate_sheet
from cuekit.exceptions import (
    ArityError,
    CommandError,
    ContextError,
    CueError,
    CueLineError,
    CueReadError,
    CueValidationError,
    FieldAlreadySetError,
    IndexNumberError,
    NoOpenTrackError,
    TimestampFormatError,
    TrackSequenceError,
    UnexpectedCommandError,
)

if TYPE_CHECKING:
    from cuekit.cue.lines import CueSource

logger = logging.getLogger(__name__)

MAX_TRACKS = 99

# Signed ASCII decimal; digit separators and non-ASCII digits are rejected.
_INTEGER = re.compile(r"[+-]?[0-9]+")

ParseObserver = Callable[[ParseSummary], None]


@dataclass
class _TrackDraft:
    """Mutable track state while the parse is in progress."""

    number: int
    type: str | None = None
    title: str | None = None
    index01: IndexPoint | None = None

    def freeze(self) -> CueTrack:
        return CueTrack(number=self.number, type=self.type, title=self.title, index01=self.index01)


def _parse_number(token: str) -> int:
    if _INTEGER.fullmatch(token) is None:
        raise ValueError(f"invalid literal for int() with base 10: {token!r}")
    return int(token)


def _check_arity(command: CueCommand | RemCommand, params: list[str], label: str) -> None:
    try:
        command.arity.check(len(params))
    except ArityError as e:
        raise ContextError(f"invalid {label} parameters", e) from e


def _assign(current: str | None, candidate: str | None, context: str) -> str | None:
    try:
        return assign_once(current, candidate)
    except FieldAlreadySetError as e:
        raise ContextError(context, e) from e


class CueParser:
    """Builds a CueSheet from normalized lines.

    One instance holds the in-progress document of exactly one parse.
    Handlers are named ``cmd_<command>`` and ``rem_<subcommand>``.
    """

    def __init__(self) -> None:
        self.file_name: str | None = None
        self.format: str | None = None
        self.performer: str | None = None
        self.title: str | None = None
        self.genre: str | None = None
        self.date: str | None = None
        self._tracks: list[_TrackDraft] = []
        # Track that TITLE and INDEX apply to; moved by every TRACK.
        self._open_track: _TrackDraft | None = None

    def parse_line(self, line: str) -> None:
        """Dispatch one normalized, non-empty line.

        Raises:
            UnexpectedCommandError: If the command is not recognized.
            CommandError: Wrapping any handler failure.
        """
        tokens = line.split()
        if not tokens:
            raise UnexpectedCommandError(line)
        token, *params = tokens
        command = CueCommand.lookup(token)
        if command is None:
            raise UnexpectedCommandError(token)
        logger.debug("Command `%s`. Args: %s", token, params)
        try:
            _COMMAND_HANDLERS[command](self, params)
        except CueError as e:
            raise CommandError(token, e) from e

    def cmd_file(self, params: list[str]) -> None:
        # FILE "filename.flac" WAVE
        _check_arity(CueCommand.FILE, params, "FILE")
        *name, file_format = params
        self.format = _assign(self.format, text_value([file_format]), "error parsing FILE format")
        self.file_name = _assign(self.file_name, text_value(name), "error parsing FILE name")

    def cmd_performer(self, params: list[str]) -> None:
        _check_arity(CueCommand.PERFORMER, params, "PERFORMER")
        self.performer = _assign(
            self.performer, text_value(params), "error parsing PERFORMER parameters"
        )

    def cmd_title(self, params: list[str]) -> None:
        _check_arity(CueCommand.TITLE, params, "TITLE")
        track = self._open_track
        if track is None:
            self.title = _assign(self.title, text_value(params), "error parsing album TITLE")
        else:
            track.title = _assign(
                track.title, text_value(params), f"error parsing track {track.number} TITLE"
            )

    def cmd_track(self, params: list[str]) -> None:
        _check_arity(CueCommand.TRACK, params, "TRACK")
        number_token, track_type = params
        try:
            number = self._next_track_number(number_token)
        except TrackSequenceError as e:
            raise ContextError("invalid track number", e) from e
        track = _TrackDraft(number=number)
        track.type = _assign(track.type, text_value([track_type]), "error parsing track type")
        self._tracks.append(track)
        self._open_track = track

    def _next_track_number(self, token: str) -> int:
        """Return the number of the track being opened.

        Raises:
            TrackSequenceError: If *token* is not an integer, is not the next
                number in sequence, or exceeds MAX_TRACKS.
        """
        try:
            number = _parse_number(token)
        except ValueError as e:
            raise TrackSequenceError(f"failed to parse track number: {e}") from e
        expected = len(self._tracks) + 1
        if number != expected:
            raise TrackSequenceError(f"expected track number {expected}, got {number}")
        if number > MAX_TRACKS:
            raise TrackSequenceError(f"cannot have more than {MAX_TRACKS} tracks")
        return number

    def cmd_index(self, params: list[str]) -> None:
        # Only INDEX 01 (track start) is accepted.
        _check_arity(CueCommand.INDEX, params, "TRACK INDEX")
        number_token, timestamp = params
        try:
            index_number = _parse_number(number_token)
        except ValueError as e:
            raise IndexNumberError(f"failed to parse index number: {e}") from e
        if index_number != 1:
            raise IndexNumberError(f"expected index number 1, got {index_number}")
        try:
            point = parse_timestamp(timestamp)
        except TimestampFormatError as e:
            raise ContextError("error parsing timestamp and frame", e) from e
        track = self._open_track
        if track is None:
            raise NoOpenTrackError("INDEX")
        track.index01 = assign_once(track.index01, point)

    def cmd_rem(self, params: list[str]) -> None:
        _check_arity(CueCommand.REM, params, "REM")
        token, *sub_params = params
        subcommand = RemCommand.lookup(token)
        if subcommand is None:
            logger.debug("Ignoring REM comment: %s", " ".join(params))
            return
        try:
            _REM_HANDLERS[subcommand](self, sub_params)
        except CueError as e:
            raise ContextError(f'error parsing REM "{token}" command', e) from e

    def rem_genre(self, params: list[str]) -> None:
        _check_arity(RemCommand.GENRE, params, "REM GENRE")
        self.genre = _assign(self.genre, text_value(params), "error parsing REM GENRE parameters")

    def rem_date(self, params: list[str]) -> None:
        _check_arity(RemCommand.DATE, params, "REM DATE")
        self.date = _assign(self.date, text_value(params), "error parsing REM DATE parameters")

    def get_cue_sheet(self) -> CueSheet:
        """Freeze the parsed state into a CueSheet (not validated)."""
        return CueSheet(
            file_name=self.file_name,
            format=self.format,
            performer=self.performer,
            title=self.title,
            genre=self.genre,
            date=self.date,
            tracks=tuple(track.freeze() for track in self._tracks),
        )


# Built eagerly so a command without a handler fails at import time.
_COMMAND_HANDLERS: dict[CueCommand, Callable[[CueParser, list[str]], None]] = {
    command: getattr(CueParser, f"cmd_{command.name.lower()}") for command in CueCommand
}
_REM_HANDLERS: dict[RemCommand, Callable[[CueParser, list[str]], None]] = {
    subcommand: getattr(CueParser, f"rem_{subcommand.name.lower()}") for subcommand in RemCommand
}


def parse(source: CueSource, observer: ParseObserver | None = None) -> CueSheet:
    """Parse a CUE stream and return the validated CueSheet.

    Args:
        source: Text stream, binary UTF-8 stream, or iterable of lines.
        observer: Optional callback receiving a ParseSummary on success.

    Returns:
        The validated CueSheet.

    Raises:
        CueLineError: If a line cannot be parsed.
        CueValidationError: If the finished document is structurally invalid.
        CueReadError: If the stream cannot be decoded.
    """
    parser = CueParser()
    reader = CueLineReader(source)
    for line_number, line in reader:
        try:
            parser.parse_line(line)
        except CueError as e:
            raise CueLineError(line_number, line, e) from e

    sheet = parser.get_cue_sheet()
    try:
        validate_sheet(sheet)
    except CueError as e:
        raise CueValidationError(e) from e

    # Validation guarantees file name and format are set.
    summary = ParseSummary(
        lines=reader.line_count,
        file_name=sheet.file_name or "",
        format=sheet.format or "",
        track_count=len(sheet.tracks),
    )
    logger.info(
        "cue sheet parsed correctly: lines=%d file=%s format=%s tracks=%d",
        summary.lines,
        summary.file_name,
        summary.format,
        summary.track_count,
    )
    if observer is not None:
        observer(summary)
    return sheet


def parse_string(text: str, observer: ParseObserver | None = None) -> CueSheet:
    """Parse CUE sheet text held in memory."""
    return parse(io.StringIO(text), observer)


def parse_file(path: str | Path, observer: ParseObserver | None = None) -> CueSheet:
    """Parse a .cue file and return a CueSheet.

    The file is read as UTF-8, with an optional byte-order mark.

    Raises:
        CueReadError: If the file cannot be opened or decoded.
        CueLineError: If a line cannot be parsed.
        CueValidationError: If the sheet is structurally invalid.
    """
    path = Path(path)
    try:
        with path.open("rb") as f:
            return parse(f, observer)
    except OSError as e:
        raise CueReadError(f"Cannot read {path}: {e}") from e
