"""
Constructors for durations given as hours, minutes and seconds.

The `_opt` variants return None for out of range components. The others raise `OutOfRangeError`,
use them only for values you control (e.g. literals), not for untrusted input.
"""
from typing import Optional

from .duration import Duration, NANOS_PER_MILLI, NANOS_PER_MICRO, NANOS_PER_SEC
from .errors import OutOfRangeError


def _is_int(v):
    return isinstance(v, int) and not isinstance(v, bool)


def _build(h, m, s, sub = 0, sub_limit = 1, nanos_per_sub = 0) -> Optional[Duration]:
    if not all(_is_int(v) for v in (h, m, s, sub)):
        return None
    if h < 0 or not 0 <= m < 60 or not 0 <= s < 60 or not 0 <= sub < sub_limit:
        return None
    try:
        return Duration.new(h * 3600 + m * 60 + s, sub * nanos_per_sub)
    except OutOfRangeError:
        return None


def _unwrap(duration: Optional[Duration], *parts) -> Duration:
    if duration is None:
        raise OutOfRangeError(f"invalid duration components {parts!r}")
    return duration


def from_hms_opt(h: int, m: int, s: int) -> Optional[Duration]:
    """ Duration of `h` hours, `m` minutes and `s` seconds, or None if `m` or `s` isn't in [0, 60) """
    return _build(h, m, s)


def from_hms(h: int, m: int, s: int) -> Duration:
    return _unwrap(from_hms_opt(h, m, s), h, m, s)


def from_hms_milli_opt(h: int, m: int, s: int, milli: int) -> Optional[Duration]:
    """ Like `from_hms_opt` with an extra millisecond component in [0, 1000) """
    return _build(h, m, s, milli, 1_000, NANOS_PER_MILLI)


def from_hms_milli(h: int, m: int, s: int, milli: int) -> Duration:
    return _unwrap(from_hms_milli_opt(h, m, s, milli), h, m, s, milli)


def from_hms_micro_opt(h: int, m: int, s: int, micro: int) -> Optional[Duration]:
    """ Like `from_hms_opt` with an extra microsecond component in [0, 1_000_000) """
    return _build(h, m, s, micro, 1_000_000, NANOS_PER_MICRO)


def from_hms_micro(h: int, m: int, s: int, micro: int) -> Duration:
    return _unwrap(from_hms_micro_opt(h, m, s, micro), h, m, s, micro)


def from_hms_nano_opt(h: int, m: int, s: int, nano: int) -> Optional[Duration]:
    """ Like `from_hms_opt` with an extra nanosecond component in [0, 1_000_000_000) """
    return _build(h, m, s, nano, NANOS_PER_SEC, 1)


def from_hms_nano(h: int, m: int, s: int, nano: int) -> Duration:
    return _unwrap(from_hms_nano_opt(h, m, s, nano), h, m, s, nano)
