"""Parsing of ``MM:SS:FF`` index timestamps."""

from __future__ import annotations

import re
from datetime import timedelta

from cuekit.cue.models import IndexPoint
from cuekit.exceptions import TimestampFormatError

# Exactly two ASCII digits per field.
_TIMESTAMP_RE = re.compile(r"([0-9]{2}):([0-9]{2}):([0-9]{2})")


def parse_timestamp(token: str) -> IndexPoint:
    """Convert an ``MM:SS:FF`` token into an IndexPoint.

    The time component is ``minutes * 60 + seconds``; the frame is taken
    verbatim, without a check against the 75 frames per second limit.

    Raises:
        TimestampFormatError: If the token does not match MM:SS:FF.
    """
    match = _TIMESTAMP_RE.fullmatch(token)
    if match is None:
        raise TimestampFormatError(token)
    minutes, seconds, frames = (int(part) for part in match.groups())
    return IndexPoint(timestamp=timedelta(minutes=minutes, seconds=seconds), frame=frames)
