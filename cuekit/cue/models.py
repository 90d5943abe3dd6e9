"""Data model for parsed CUE sheets."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import timedelta

# CD audio constants
CD_SAMPLE_RATE = 44100
CD_FRAMES_PER_SECOND = 75
CD_SAMPLES_PER_FRAME = CD_SAMPLE_RATE // CD_FRAMES_PER_SECOND  # 588


@dataclass(frozen=True, order=True)
class IndexPoint:
    """A track start position as given by ``INDEX 01 MM:SS:FF``.

    Ordering compares the timestamp first and the frame second. The frame
    is kept verbatim and is not checked against the 75 frames per second
    CD ceiling.
    """

    timestamp: timedelta = timedelta(0)
    frame: int = 0

    def __str__(self) -> str:
        total = int(self.timestamp.total_seconds())
        minutes, seconds = divmod(total, 60)
        return f"{minutes:02d}:{seconds:02d}:{self.frame:02d}"

    @property
    def total_frames(self) -> int:
        """Position in CD frames (1/75 second)."""
        return int(self.timestamp.total_seconds()) * CD_FRAMES_PER_SECOND + self.frame

    @property
    def samples(self) -> int:
        """Position in samples at 44100 Hz."""
        return self.total_frames * CD_SAMPLES_PER_FRAME


@dataclass(frozen=True)
class CueTrack:
    """A single track within a cue sheet."""

    number: int
    type: str | None = None
    title: str | None = None
    index01: IndexPoint | None = None

    @property
    def start(self) -> IndexPoint:
        """The INDEX 01 point, or 00:00:00 when the track has none."""
        return self.index01 if self.index01 is not None else IndexPoint()


@dataclass(frozen=True)
class CueSheet:
    """A parsed cue sheet with album metadata and track list.

    Tracks are kept in disc order; ``tracks[i].number == i + 1``.
    """

    file_name: str | None = None
    format: str | None = None
    performer: str | None = None
    title: str | None = None
    genre: str | None = None
    date: str | None = None
    tracks: tuple[CueTrack, ...] = ()


@dataclass(frozen=True)
class ParseSummary:
    """Counts reported to a parse observer after a successful parse."""

    lines: int
    file_name: str
    format: str
    track_count: int
