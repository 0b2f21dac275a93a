"""ISO-8601 short duration parsing (e.g. ``PT2H35M``)."""

from __future__ import annotations

import re
from typing import NamedTuple

# ISO-8601 duration → minutes (e.g. "PT2H30M" → 150)
_DURATION_RE = re.compile(r"PT(?:(\d+)H)?(?:(\d+)M)?")


class ParsedDuration(NamedTuple):
    """Result of :func:`parse_duration`.

    ``parsed`` is False when the input did not match the expected format;
    ``minutes`` is then 0 and callers decide whether that is acceptable.
    """

    minutes: int
    parsed: bool

    def require(self) -> int:
        """Return the minutes, raising ``ValueError`` if parsing failed."""
        if not self.parsed:
            msg = "Unparsable ISO-8601 duration"
            raise ValueError(msg)
        return self.minutes


UNPARSABLE = ParsedDuration(minutes=0, parsed=False)


def duration_components(iso_dur: str | None) -> tuple[int | None, int | None] | None:
    """Hours and minutes as written in *iso_dur*; a missing component is None.

    Returns None when the text is not a ``PT…H…M`` duration with at least
    one component.
    """
    if not isinstance(iso_dur, str):
        return None
    m = _DURATION_RE.fullmatch(iso_dur.strip())
    if not m or (m.group(1) is None and m.group(2) is None):
        return None
    hours, minutes = m.group(1), m.group(2)
    return (
        int(hours) if hours is not None else None,
        int(minutes) if minutes is not None else None,
    )


def parse_duration(iso_dur: str | None) -> ParsedDuration:
    """Convert an ISO-8601 duration string to minutes. Never raises."""
    components = duration_components(iso_dur)
    if components is None:
        return UNPARSABLE
    hours, minutes = components
    return ParsedDuration(minutes=(hours or 0) * 60 + (minutes or 0), parsed=True)


def duration_minutes(iso_dur: str | None, default: int = 0) -> int:
    """Minutes in *iso_dur*, or *default* when it cannot be parsed."""
    result = parse_duration(iso_dur)
    return result.minutes if result.parsed else default
