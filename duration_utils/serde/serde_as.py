"""
`Iso8601` annotation for serializing any supported duration type as an ISO 8601 string.

E.g.
```
class Job(BaseModel):
    wall_time: A[timedelta, Iso8601()]
    timeout: A[Duration, Iso8601()]
```
"""
from typing import Any
from datetime import timedelta
from loguru import logger
from pydantic import GetCoreSchemaHandler, GetJsonSchemaHandler
from pydantic.json_schema import JsonSchemaValue
from pydantic_core import core_schema

from ..duration import Duration
from ..errors import InvalidValueError, NegativeDurationError, OutOfRangeError, EXPECTED_PATTERN
from ..iso8601 import to_iso8601
from . import direct
from .direct import ISO_DURATION_JSON_SCHEMA


def serialize_timedelta(delta: timedelta) -> str:
    """ Serialize a timedelta. Negative timedeltas can't be represented and raise NegativeDurationError. """
    try:
        duration = Duration.from_timedelta(delta)
    except NegativeDurationError:
        logger.warning(f"Refusing to serialize negative duration {delta}")
        raise
    return to_iso8601(duration)


def deserialize_timedelta(value: Any) -> timedelta:
    duration = direct.deserialize(value)
    try:
        return duration.to_timedelta()
    except OutOfRangeError as e:
        raise InvalidValueError(value, EXPECTED_PATTERN) from e


def _validate_timedelta(value: Any) -> timedelta:
    if isinstance(value, timedelta):
        return value
    return deserialize_timedelta(value)


class Iso8601:
    """
    Marker for `Annotated` duration fields to (de)serialize them as ISO 8601 strings.
    Supports `Duration` and `datetime.timedelta`. Use an instance, i.e. `Iso8601()`.
    """

    def __get_pydantic_core_schema__(
        self, source_type: Any, handler: GetCoreSchemaHandler,
    ) -> core_schema.CoreSchema:
        if source_type is Duration:
            validate, serialize = direct.validate, direct.serialize
        elif isinstance(source_type, type) and issubclass(source_type, timedelta):
            validate, serialize = _validate_timedelta, serialize_timedelta
        else:
            raise TypeError(f"Iso8601 only supports Duration and timedelta, not {source_type!r}")

        return core_schema.no_info_plain_validator_function(
            validate,
            serialization = core_schema.plain_serializer_function_ser_schema(
                serialize, return_schema = core_schema.str_schema(),
            ),
        )

    def __get_pydantic_json_schema__(
        self, schema: core_schema.CoreSchema, handler: GetJsonSchemaHandler,
    ) -> JsonSchemaValue:
        return dict(ISO_DURATION_JSON_SCHEMA)
