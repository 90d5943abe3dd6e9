"""Exception hierarchy for cuekit."""

from __future__ import annotations

from pathlib import Path


class CuekitError(Exception):
    """Base exception for all cuekit errors.

    All exceptions in this package inherit from this class,
    allowing callers to catch all cuekit errors with
    a single except clause.
    """

    pass


# Configuration Errors
class ConfigError(CuekitError):
    """Configuration-related errors."""

    pass


class ConfigParseError(ConfigError):
    """Configuration file has invalid syntax."""

    def __init__(self, path: Path, detail: str) -> None:
        self.path = path
        self.detail = detail
        super().__init__(f"Invalid config at {path}: {detail}")


class ConfigValidationError(ConfigError):
    """Configuration value is invalid."""

    def __init__(self, key: str, value: object, reason: str) -> None:
        self.key = key
        self.value = value
        self.reason = reason
        super().__init__(f"Invalid config value for '{key}': {reason}")


# CUE sheet Errors
class CueError(CuekitError):
    """CUE sheet related errors."""

    pass


class CueReadError(CueError):
    """The CUE stream or file could not be read or decoded."""

    pass


class CueParseError(CueError):
    """Leaf cause of a failed parse.

    Wrapping errors (CommandError, CueLineError, CueValidationError) carry
    one of these as their innermost ``cause``.
    """

    pass


class UnexpectedCommandError(CueParseError):
    """The command token is not in the descriptor table."""

    def __init__(self, command: str) -> None:
        self.command = command
        super().__init__(f"unexpected command: {command}")


class ArityError(CueParseError):
    """A command received the wrong number of parameters."""

    def __init__(self, expected: int, got: int, *, minimum: bool = False) -> None:
        self.expected = expected
        self.got = got
        self.minimum = minimum
        if minimum:
            super().__init__(f"expected at least {expected} parameters, got {got}")
        else:
            super().__init__(f"expected {expected} parameters, got {got}")


class FieldAlreadySetError(CueParseError):
    """A set-once field already holds a value."""

    def __init__(self, current: object) -> None:
        self.current = current
        super().__init__(f"field already set: {current}")


class TrackSequenceError(CueParseError):
    """TRACK number is unparsable, out of order or above the track ceiling."""

    pass


class IndexNumberError(CueParseError):
    """INDEX number is unparsable or not 01."""

    pass


class TimestampFormatError(CueParseError):
    """Index timestamp does not match MM:SS:FF."""

    def __init__(self, token: str) -> None:
        self.token = token
        super().__init__(f'invalid timestamp "{token}": expected MM:SS:FF')


class NoOpenTrackError(CueParseError):
    """A track-level command appeared before any TRACK."""

    def __init__(self, command: str) -> None:
        self.command = command
        super().__init__(f"no open track for {command}")


class SheetStructureError(CueParseError):
    """A required element is missing or tracks are out of order."""

    pass


class _WrappedCueError(CueError):
    """An error that adds context in front of a wrapped cause."""

    def __init__(self, message: str, cause: CueError) -> None:
        self.cause = cause
        super().__init__(f"{message}: {cause}")

    @property
    def leaf(self) -> CueError:
        """Innermost cause of the breadcrumb chain."""
        err: CueError = self
        while isinstance(err, _WrappedCueError):
            err = err.cause
        return err


class ContextError(_WrappedCueError):
    """Handler-level context such as ``invalid FILE parameters``."""

    pass


class CommandError(_WrappedCueError):
    """A handler failed; carries the command token as typed."""

    def __init__(self, command: str, cause: CueError) -> None:
        self.command = command
        super().__init__(f'error parsing "{command}" command', cause)


class CueLineError(_WrappedCueError):
    """A line could not be parsed; carries the line number and text."""

    def __init__(self, line_number: int, line: str, cause: CueError) -> None:
        self.line_number = line_number
        self.line = line
        self.cause = cause
        CueError.__init__(self, f"line {line_number}:\t{line}:\n\t{cause}")

    @property
    def command(self) -> str | None:
        """Command token, or None when dispatch itself failed."""
        if isinstance(self.cause, CommandError):
            return self.cause.command
        return None


class CueValidationError(_WrappedCueError):
    """The fully read document violates a structural rule."""

    def __init__(self, cause: CueError) -> None:
        super().__init__("invalid cue sheet", cause)
