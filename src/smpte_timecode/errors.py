"""Exceptions raised by the timecode classes."""


class TimecodeError(Exception):
    """Raised when an error occurred in timecode calculation."""


class InvalidTimecodeError(TimecodeError, ValueError):
    """Raised when a value can not be interpreted as a timecode."""


class UnsupportedFrameRateError(TimecodeError, ValueError):
    """Raised when the frame rate is not one of the broadcast frame rates."""


class UnsupportedDropFrameError(TimecodeError, ValueError):
    """Raised when drop frame is requested for a frame rate without it."""


class NegativeValueError(TimecodeError, ValueError):
    """Raised when a frame count or a number of seconds is negative."""


class OutOfRangeError(TimecodeError, ValueError):
    """Raised when a timecode field is set outside of its valid range."""
