"""Duration helpers.

Durations travel through the resolver as ``[HH:]MM:SS`` strings (the shape
search backends report) and as integer milliseconds (the shape players seek
with). These two functions convert between them.
"""

from __future__ import annotations

from ...domain.shared.messages import ErrorMessages

_MS_PER_SECOND = 1000
_MS_PER_MINUTE = 60 * _MS_PER_SECOND
_MS_PER_HOUR = 60 * _MS_PER_MINUTE


def ms_to_time(duration_ms: int | float) -> str:
    """Format milliseconds as ``MM:SS``, or ``HH:MM:SS`` when there are hours.

    >>> ms_to_time(0)
    '00:00'
    >>> ms_to_time(3661000)
    '01:01:01'
    """
    seconds = int(duration_ms // _MS_PER_SECOND % 60)
    minutes = int(duration_ms // _MS_PER_MINUTE % 60)
    hours = int(duration_ms // _MS_PER_HOUR)

    prefix = f"{hours:02d}:" if hours else ""
    return f"{prefix}{minutes:02d}:{seconds:02d}"


def time_to_ms(duration: str) -> int:
    """Parse a colon-separated duration into milliseconds.

    The rightmost segment is seconds, then minutes, then hours; any further
    leading segment scales by the next power of 60.

    Raises:
        ValueError: If a segment is not an integer.
    """
    total_seconds = 0
    for power, segment in enumerate(reversed(duration.split(":"))):
        try:
            value = int(segment.strip())
        except ValueError:
            raise ValueError(
                ErrorMessages.INVALID_DURATION_SEGMENT.format(segment=segment, text=duration)
            ) from None
        total_seconds += value * 60**power
    return total_seconds * _MS_PER_SECOND
