""" Helpers for creating durations and converting them to and from ISO 8601 strings """
from loguru import logger

from .duration import Duration, ZERO, MAX
from .errors import (
    DurationError, OutOfRangeError, InvalidValueError, InvalidTypeError, NegativeDurationError,
    EXPECTED_PATTERN,
)
from .hms import (
    from_hms, from_hms_opt, from_hms_milli, from_hms_milli_opt, from_hms_micro, from_hms_micro_opt,
    from_hms_nano, from_hms_nano_opt,
)
from .iso8601 import to_iso8601, from_iso8601
from .serde.direct import IsoDuration
from .serde.opt import OptionalIsoDuration
from .serde.serde_as import Iso8601
from .config import DurationSettings, get_settings, configure_logging

logger.disable(__name__)
