""" Exception hierarchy for duration construction and (de)serialization """
from typing import Any


EXPECTED_PATTERN = "PdDThHmMsS"
""" Human readable description of the accepted ISO 8601 duration format """


class DurationError(ValueError):
    """
    Base exception for duration errors.

    Subclasses ValueError so pydantic validators surface them as normal validation errors.
    """


class OutOfRangeError(DurationError):
    """ Raised when a constructor argument or arithmetic result is out of range """


class InvalidValueError(DurationError):
    """ Raised when a string is not a valid ISO 8601 duration """

    def __init__(self, value: Any, expected: str = EXPECTED_PATTERN):
        super().__init__(f"invalid value: {value!r}, expected {expected}")
        self.value = value
        self.expected = expected


class InvalidTypeError(DurationError):
    """ Raised when a duration is deserialized from something that isn't a string """

    def __init__(self, value: Any, expected: str = EXPECTED_PATTERN):
        super().__init__(f"invalid type: {type(value).__name__}, expected a string {expected}")
        self.value = value
        self.expected = expected


class NegativeDurationError(DurationError):
    """ Raised when a signed duration can't be represented as a Duration """

    def __init__(self, value: Any):
        super().__init__(f"only positive duration supported for now but got {value}")
        self.value = value
