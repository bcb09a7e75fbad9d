"""Validation of timecode inputs."""

from __future__ import annotations

import logging
import re

from .errors import InvalidTimecodeError, NegativeValueError, OutOfRangeError
from .framerate import FrameRate, FrameRateLike

logger = logging.getLogger(__name__)

# hh:mm:ss:ff or hh:mm:ss;ff
TIMECODE_PATTERN = re.compile(
    r"^(?P<hours>[01][0-9]|2[0-3])"
    r":(?P<minutes>[0-5][0-9])"
    r":(?P<seconds>[0-5][0-9])"
    r"(?P<delimiter>[:;])"
    r"(?P<frames>[0-5][0-9])$"
)


def is_skipped_frame(minutes: int, seconds: int, frames: int, drop_frames: int) -> bool:
    """Return True if the frame number does not exist in drop frame counting.

    Args:
        minutes (int): The minutes portion of the timecode.
        seconds (int): The seconds portion of the timecode.
        frames (int): The frames portion of the timecode.
        drop_frames (int): Number of frames dropped per minute, 0 for non drop
            frame timecodes.
    """
    return minutes % 10 != 0 and seconds == 0 and frames < drop_frames


def is_valid_integer(value: object) -> bool:
    """Determine if the value is a valid frame count.

    Raises:
        NegativeValueError: If the value is a negative integer.

    Returns:
        bool: False if the value is not an integer.
    """
    if isinstance(value, bool) or not isinstance(value, int):
        return False

    if value < 0:
        raise NegativeValueError(f"Negative frames not supported, got {value}.")

    return True


def is_valid_string(value: object, rate: FrameRate | FrameRateLike, drop_frame: bool) -> bool:
    """Determine if the value is a valid timecode string.

    Args:
        value (object): The value to check.
        rate (FrameRate | FrameRateLike): The frame rate the timecode is in.
        drop_frame (bool): Whether the timecode must be a drop frame one.

    Returns:
        bool: True if value is a "HH:MM:SS:FF" string ("HH:MM:SS;FF" for drop
            frame) naming a frame that exists at the given frame rate.
    """
    if not isinstance(value, str):
        return False

    match = TIMECODE_PATTERN.match(value)
    if match is None:
        return False

    if (match["delimiter"] == ";") != drop_frame:
        return False

    frame_rate = FrameRate.coerce(rate)
    minutes = int(match["minutes"])
    seconds = int(match["seconds"])
    frames = int(match["frames"])

    if frames >= frame_rate.int_framerate:
        return False

    drop_frames = frame_rate.drop_frames if drop_frame else 0
    return not is_skipped_frame(minutes, seconds, frames, drop_frames)


def parse_timecode(
    value: str, rate: FrameRate | FrameRateLike, drop_frame: bool = False
) -> tuple[int, int, int, int]:
    """Parse the given timecode string.

    Args:
        value (str): The timecode string, "HH:MM:SS:FF" or "HH:MM:SS;FF".
        rate (FrameRate | FrameRateLike): The frame rate of the timecode.
        drop_frame (bool): Whether the timecode is a drop frame one.

    Raises:
        InvalidTimecodeError: If the string is not a valid timecode.

    Returns:
        (int, int, int, int): A tuple containing the hours, minutes, seconds
            and frames part of the Timecode.
    """
    if not is_valid_string(value, rate, drop_frame):
        logger.debug("rejected timecode string %r at %s fps", value, rate)
        raise InvalidTimecodeError(f"Invalid timecode string: {value!r}")

    hrs, mins, rest = value.split(":", 2)
    secs, frs = rest[:2], rest[3:]
    return int(hrs), int(mins), int(secs), int(frs)


def validate_field(name: str, value: int, upper: int) -> int:
    """Check that a timecode field is in the [0, upper) range.

    Args:
        name (str): Name of the field, used in the error message.
        value (int): The value to check.
        upper (int): The exclusive upper bound.

    Raises:
        TypeError: If the value is not an integer.
        OutOfRangeError: If the value is out of range.

    Returns:
        int: The value.
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(
            f"{name} should be an integer, not a {value.__class__.__name__}"
        )

    if not 0 <= value < upper:
        raise OutOfRangeError(
            f"The {name} must be between 0 and {upper - 1}, got {value}"
        )

    return value
