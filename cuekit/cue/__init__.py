"""CUE sheet parsing: line normalizer, command handlers and validator."""

from cuekit.cue.models import CueSheet, CueTrack, IndexPoint, ParseSummary
from cuekit.cue.parser import MAX_TRACKS, CueParser, parse, parse_file, parse_string
from cuekit.cue.validator import validate_sheet

__all__ = [
    "MAX_TRACKS",
    "CueParser",
    "CueSheet",
    "CueTrack",
    "IndexPoint",
    "ParseSummary",
    "parse",
    "parse_file",
    "parse_string",
    "validate_sheet",
]
