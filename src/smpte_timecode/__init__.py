"""SMPTE timecode value type with drop frame support."""

import logging

from .engine import (
    drop_frame_constants,
    fields_from_frame_count,
    format_timecode,
    frame_count_from_fields,
    frames_per_day,
)
from .errors import (
    InvalidTimecodeError,
    NegativeValueError,
    OutOfRangeError,
    TimecodeError,
    UnsupportedDropFrameError,
    UnsupportedFrameRateError,
)
from .framerate import DROP_FRAME_RATES, FrameRate, frame_rate_supported
from .helpers import FrameCount, TimecodeString, WallClock, to_time_input
from .timecode import DEFAULT_DROP_FRAME, DEFAULT_FRAME_RATE, Timecode, TimecodeBuilder
from .validations import is_valid_string, parse_timecode

__version__ = "1.0.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "DEFAULT_DROP_FRAME",
    "DEFAULT_FRAME_RATE",
    "DROP_FRAME_RATES",
    "FrameCount",
    "FrameRate",
    "InvalidTimecodeError",
    "NegativeValueError",
    "OutOfRangeError",
    "Timecode",
    "TimecodeBuilder",
    "TimecodeError",
    "TimecodeString",
    "UnsupportedDropFrameError",
    "UnsupportedFrameRateError",
    "WallClock",
    "drop_frame_constants",
    "fields_from_frame_count",
    "format_timecode",
    "frame_count_from_fields",
    "frame_rate_supported",
    "frames_per_day",
    "is_valid_string",
    "parse_timecode",
    "to_time_input",
]
