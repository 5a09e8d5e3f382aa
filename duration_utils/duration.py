""" The Duration value type used by the constructors and the ISO 8601 codec """
from typing import NamedTuple
from datetime import timedelta
import math

from .errors import OutOfRangeError, NegativeDurationError

NANOS_PER_SEC = 1_000_000_000
NANOS_PER_MILLI = 1_000_000
NANOS_PER_MICRO = 1_000
MAX_SECS = 2**64 - 1


class Duration(NamedTuple):
    """
    A non-negative span of time with nanosecond resolution.

    Stored as whole seconds plus a sub-second nanosecond part. Use the classmethods rather than the
    raw constructor unless you already have normalized values, the raw constructor does not check
    that `0 <= nanos < 1e9`.
    Durations compare and sort by (secs, nanos) and are only falsy when zero. They are never equal
    to plain tuples, and `sum()` works on them.
    """

    secs: int = 0
    """ Whole seconds """

    nanos: int = 0
    """ Sub-second part in nanoseconds """

    @classmethod
    def new(cls, secs: int, nanos: int = 0) -> "Duration":
        """ Create a duration, carrying any nanos overflow into secs """
        carry, nanos = divmod(nanos, NANOS_PER_SEC)
        secs += carry
        if secs < 0 or secs > MAX_SECS:
            raise OutOfRangeError(f"duration of {secs}s {nanos}ns is out of range")
        return cls(secs, nanos)

    @classmethod
    def from_secs(cls, secs: int): return cls.new(secs)
    @classmethod
    def from_millis(cls, millis: int): return cls.new(0, millis * NANOS_PER_MILLI)
    @classmethod
    def from_micros(cls, micros: int): return cls.new(0, micros * NANOS_PER_MICRO)
    @classmethod
    def from_nanos(cls, nanos: int): return cls.new(0, nanos)

    @classmethod
    def from_secs_float(cls, value: float) -> "Duration":
        """ Convert a float number of seconds, rounding to the nearest nanosecond """
        if not math.isfinite(value) or value < 0:
            raise OutOfRangeError(f"can't convert {value!r} seconds to a duration")
        secs = int(value)
        return cls.new(secs, round((value - secs) * NANOS_PER_SEC))

    @classmethod
    def from_timedelta(cls, delta: timedelta) -> "Duration":
        if delta < timedelta(0):
            raise NegativeDurationError(delta)
        return cls.new(delta.days * 86400 + delta.seconds, delta.microseconds * NANOS_PER_MICRO)

    def to_timedelta(self) -> timedelta:
        """ Convert to a timedelta. Nanoseconds below microsecond precision are truncated. """
        try:
            return timedelta(seconds=self.secs, microseconds=self.nanos // NANOS_PER_MICRO)
        except OverflowError as e:
            raise OutOfRangeError(f"{self.secs}s is too large for a timedelta") from e

    def total_seconds(self) -> float:
        return self.secs + self.nanos / NANOS_PER_SEC

    def as_nanos(self) -> int:
        return self.secs * NANOS_PER_SEC + self.nanos

    @property
    def subsec_millis(self): return self.nanos // NANOS_PER_MILLI
    @property
    def subsec_micros(self): return self.nanos // NANOS_PER_MICRO
    @property
    def subsec_nanos(self): return self.nanos

    def __add__(self, other):
        if not isinstance(other, Duration):
            return NotImplemented
        return Duration.new(self.secs + other.secs, self.nanos + other.nanos)

    def __radd__(self, other):
        # sum() starts from 0
        if other == 0:
            return self
        return NotImplemented

    def __mul__(self, other):
        return NotImplemented
    __rmul__ = __mul__

    # Plain tuples must not compare equal, returning NotImplemented would fall back to tuple.__eq__
    def __eq__(self, other):
        if isinstance(other, Duration):
            return tuple.__eq__(self, other)
        return False if isinstance(other, tuple) else NotImplemented

    def __ne__(self, other):
        if isinstance(other, Duration):
            return tuple.__ne__(self, other)
        return True if isinstance(other, tuple) else NotImplemented

    __hash__ = tuple.__hash__

    def __bool__(self):
        return bool(self.secs or self.nanos)


ZERO = Duration()
MAX = Duration(MAX_SECS, NANOS_PER_SEC - 1)
