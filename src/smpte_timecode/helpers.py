"""Helper classes describing what a Timecode can be created from."""

from __future__ import annotations

import datetime
from dataclasses import dataclass
from fractions import Fraction
from typing import Union

from .errors import InvalidTimecodeError


@dataclass(frozen=True)
class FrameCount:
    """A number of frames since 00:00:00:00."""

    frames: int


@dataclass(frozen=True)
class TimecodeString:
    """A "HH:MM:SS:FF" or "HH:MM:SS;FF" string."""

    value: str


@dataclass(frozen=True)
class WallClock:
    """A time of day, as the seconds elapsed since midnight."""

    seconds_since_midnight: Fraction | float

    @classmethod
    def from_time(cls, value: datetime.datetime | datetime.time) -> WallClock:
        """Create a WallClock from the time of day part of the given value.

        The date and the timezone are ignored.

        Args:
            value (datetime.datetime | datetime.time): The time of day.

        Returns:
            WallClock: The seconds since midnight of the same day, exact to
                the microsecond.
        """
        seconds = (value.hour * 60 + value.minute) * 60 + value.second
        return cls(Fraction(seconds) + Fraction(value.microsecond, 1_000_000))

    @classmethod
    def from_timedelta(cls, value: datetime.timedelta) -> WallClock:
        """Create a WallClock from the time elapsed since midnight."""
        seconds = value.days * 86400 + value.seconds
        return cls(Fraction(seconds) + Fraction(value.microseconds, 1_000_000))


TimeInput = Union[FrameCount, TimecodeString, WallClock]


def to_time_input(value: object) -> TimeInput:
    """Lift a raw value to one of the Timecode input types.

    Args:
        value (object): An int (frame count), a str (timecode), a
            datetime.datetime or datetime.time (time of day), a
            datetime.timedelta (time since midnight), a Timecode (its frame
            count) or an already tagged input.

    Raises:
        InvalidTimecodeError: If the value is none of the above.

    Returns:
        FrameCount | TimecodeString | WallClock: The tagged input.
    """
    if isinstance(value, (FrameCount, TimecodeString, WallClock)):
        return value
    # bool is an int subclass but never a frame count
    if isinstance(value, bool):
        raise InvalidTimecodeError(f"Invalid timecode: {value!r}")
    if isinstance(value, int):
        return FrameCount(value)
    if isinstance(value, str):
        return TimecodeString(value)
    if isinstance(value, (datetime.datetime, datetime.time)):
        return WallClock.from_time(value)
    if isinstance(value, datetime.timedelta):
        return WallClock.from_timedelta(value)
    # another Timecode
    frame_count = getattr(value, "frame_count", None)
    if isinstance(frame_count, int):
        return FrameCount(frame_count)

    raise InvalidTimecodeError(
        f"Type {value.__class__.__name__} can not be converted to a timecode."
    )
