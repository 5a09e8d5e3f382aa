""" ISO 8601 (de)serialization for optional Duration fields, None maps to null """
from typing import Any, Optional

from ..duration import Duration
from . import direct
from .direct import IsoDuration


def serialize(duration: Optional[Duration]) -> Optional[str]:
    return None if duration is None else direct.serialize(duration)


def deserialize(value: Any) -> Optional[Duration]:
    return None if value is None else direct.deserialize(value)


OptionalIsoDuration = Optional[IsoDuration]
""" An optional version of `IsoDuration`. None is serialized as null instead of failing. """
