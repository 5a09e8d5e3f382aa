"""
ISO 8601 duration codec.

Only the `PnDTnHnMnS` subset is supported: days are the largest unit since months and years don't
have a fixed length. Seconds may have up to 9 fractional digits.
"""
from typing import Any, Optional
import re
from loguru import logger

from .duration import Duration
from .errors import OutOfRangeError


_DURATION_PAT = re.compile(
    r"(?P<sign>[-+])?P"
    r"(?:(?P<days>[-+]?[0-9]+)D)?"
    r"(?P<time>T"
        r"(?:(?P<hours>[-+]?[0-9]+)H)?"
        r"(?:(?P<minutes>[-+]?[0-9]+)M)?"
        r"(?:(?P<seconds>[-+]?[0-9]+)(?:[.,](?P<fraction>[0-9]{1,9}))?S)?"
    r")?"
)

_UNIT_SECONDS = {
    'days': 86400,
    'hours': 3600,
    'minutes': 60,
    'seconds': 1,
}


def _format_seconds(secs: int, nanos: int):
    if nanos == 0:
        return str(secs)
    return f"{secs}.{nanos:09d}".rstrip("0")


def to_iso8601(duration: Duration) -> str:
    """
    Format a duration as a minimal ISO 8601 string, e.g. `P11DT13H46M40S` or `PT10.1S`.
    Zero components are omitted, and a zero duration is `PT0S`.
    Raises OutOfRangeError if `duration` was built with negative or out of range fields.
    """
    duration = Duration.new(duration.secs, duration.nanos)
    if not duration:
        return "PT0S"

    days, rem = divmod(duration.secs, 86400)
    hours, rem = divmod(rem, 3600)
    minutes, secs = divmod(rem, 60)

    out = ["P"]
    if days:
        out.append(f"{days}D")
    if hours or minutes or secs or duration.nanos:
        out.append("T")
    if hours:
        out.append(f"{hours}H")
    if minutes:
        out.append(f"{minutes}M")
    if secs or duration.nanos:
        out.append(f"{_format_seconds(secs, duration.nanos)}S")
    return "".join(out)


def from_iso8601(text: Any) -> Optional[Duration]:
    """
    Parse an ISO 8601 duration string such as `P1DT2H3M4.5S`. Returns None if `text` is invalid.

    Each component can have its own sign, e.g. `PT1M-10S` is 50 seconds, but the total can't be
    negative. A sign in front of the `P` is accepted but ignored, so `-PT10S` is 10 seconds.
    """
    if not isinstance(text, str):
        return None

    match = _DURATION_PAT.fullmatch(text)
    if not match:
        logger.debug(f"Rejected duration {text!r}: not an ISO 8601 duration")
        return None

    groups = match.groupdict()
    # A bare "T" is only an error when there's no day component either, "P1DT" is 1 day
    if groups['time'] == "T" and not groups['days']:
        logger.debug(f"Rejected duration {text!r}: empty time designator")
        return None

    total = sum(int(groups[unit]) * scale for unit, scale in _UNIT_SECONDS.items() if groups[unit])
    fraction = groups['fraction']
    nanos = int(fraction.ljust(9, "0")) if fraction else 0

    try:
        return Duration.new(total, nanos)
    except OutOfRangeError:
        logger.debug(f"Rejected duration {text!r}: total of {total}s is out of range")
        return None
