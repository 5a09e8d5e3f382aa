""" ISO 8601 (de)serialization for Duration fields """
from typing import Any, Annotated as A
from loguru import logger
from pydantic import PlainSerializer, PlainValidator, WithJsonSchema

from ..duration import Duration
from ..errors import InvalidValueError, InvalidTypeError, EXPECTED_PATTERN
from ..iso8601 import to_iso8601, from_iso8601


ISO_DURATION_JSON_SCHEMA = {'type': 'string', 'format': 'duration'}


def serialize(duration: Duration) -> str:
    return to_iso8601(duration)


def deserialize(value: Any) -> Duration:
    """ Parse an ISO 8601 string, raising InvalidValueError or InvalidTypeError if it's invalid """
    if not isinstance(value, str):
        logger.debug(f"Can't deserialize duration from {type(value).__name__}")
        raise InvalidTypeError(value, EXPECTED_PATTERN)

    duration = from_iso8601(value)
    if duration is None:
        raise InvalidValueError(value, EXPECTED_PATTERN)
    return duration


def validate(value: Any) -> Duration:
    """ Like deserialize, but Duration objects pass through so models can be built in python """
    if isinstance(value, Duration):
        # The raw constructor doesn't check its fields
        return Duration.new(value.secs, value.nanos)
    return deserialize(value)


IsoDuration = A[
    Duration,
    PlainValidator(validate),
    PlainSerializer(serialize, return_type=str),
    WithJsonSchema(ISO_DURATION_JSON_SCHEMA),
]
"""
A Duration that serializes to an ISO 8601 string like `PT1M30S` and is parsed from one.
Validation errors are reported as a `value_error` wrapping an `InvalidValueError`.
"""
