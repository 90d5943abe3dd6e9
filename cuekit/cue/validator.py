"""Structural validation of a fully parsed cue sheet."""

from __future__ import annotations

from cuekit.cue.models import CueSheet
from cuekit.exceptions import ContextError, SheetStructureError


def validate_sheet(sheet: CueSheet) -> None:
    """Check the document-level invariants of *sheet*.

    Checks run in document order and stop at the first violation:
    file name, file format, presence of tracks, then every track's type
    and the ordering of each adjacent pair of INDEX 01 points.

    Raises:
        SheetStructureError: For a missing FILE part or an empty track list.
        ContextError: Wrapping a SheetStructureError for per-track problems.
    """
    if not sheet.file_name:
        raise SheetStructureError("missing file name")
    if not sheet.format:
        raise SheetStructureError("missing file format")
    if not sheet.tracks:
        raise SheetStructureError("missing tracks")
    try:
        _validate_tracks(sheet)
    except SheetStructureError as e:
        raise ContextError("invalid tracks", e) from e


def _validate_tracks(sheet: CueSheet) -> None:
    tracks = sheet.tracks
    for i, track in enumerate(tracks):
        if not track.type:
            raise SheetStructureError("missing track type")
        if i + 1 < len(tracks) and track.start >= tracks[i + 1].start:
            raise SheetStructureError(f"overlapping indices in tracks {i + 1} and {i + 2}")
