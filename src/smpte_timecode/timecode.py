"""Timecode class for handling timecode calculations."""

# Standard Library Imports
from __future__ import annotations

import logging
import math
import numbers
import sys
from fractions import Fraction

from .engine import fields_from_frame_count, format_timecode, frame_count_from_fields
from .errors import (
    InvalidTimecodeError,
    NegativeValueError,
    OutOfRangeError,
    UnsupportedFrameRateError,
)
from .framerate import FrameRate, FrameRateLike, frame_rate_supported
from .helpers import FrameCount, TimecodeString, WallClock, to_time_input
from .validations import (
    is_skipped_frame,
    is_valid_integer,
    is_valid_string,
    parse_timecode,
    validate_field,
)

if sys.version_info >= (3, 11):
    from typing import Self
else:
    from typing_extensions import Self

logger = logging.getLogger(__name__)

DEFAULT_FRAME_RATE = FrameRate.FR_24
DEFAULT_DROP_FRAME = False


#%%
class Timecode:
    """The main timecode class.

    Does all the calculation over frames, so the main data it holds is the
    frame count, then the hours, minutes, seconds and frames are derived from
    it by using the frame rate setting every time it changes.

    Args:
        time (int | str | datetime.datetime | datetime.time | Timecode): The
            timecode. An int is the frame count, a str a "HH:MM:SS:FF" timecode
            ("HH:MM:SS;FF" for drop frame), a datetime or a time is converted
            from the time elapsed since midnight. Tagged
            :class:`.FrameCount`, :class:`.TimecodeString` and
            :class:`.WallClock` values are accepted as well. Defaults to 0.
        frame_rate (FrameRate | Fraction | str | int | float): The frame rate,
            one of 23.976, 24, 25, 29.97, 30, 50, 59.94 or 60. Defaults to 24.
        drop_frame (bool): If True, use drop frame counting. Only 29.97 fps
            supports it. Defaults to False.

    Raises:
        UnsupportedFrameRateError: If the frame rate is not supported.
        UnsupportedDropFrameError: If drop frame is used with another frame
            rate than 29.97.
        InvalidTimecodeError: If the time can not be read as a timecode.
        NegativeValueError: If the time is negative.
    """

    def __init__(
        self,
        time: object = 0,
        frame_rate: FrameRate | FrameRateLike = DEFAULT_FRAME_RATE,
        drop_frame: bool = DEFAULT_DROP_FRAME,
    ) -> None:
        self._frame_rate = self._check_frame_rate(frame_rate, drop_frame)
        self._drop_frame = bool(drop_frame)
        self._frame_count = 0
        self._hours = self._minutes = self._seconds = self._frames = 0

        self._dispatch_set_frame_count(time)

    def _dispatch_set_frame_count(self, time: object) -> None:
        """Helper to dispatch the constructor argument to set the frame count.

        Args:
            time (object): Anything :func:`.to_time_input` accepts.
        """
        match to_time_input(time):
            case FrameCount(frames=frames):
                frame_count = frames
            case TimecodeString(value=value):
                frame_count = self.frame_count_from_timecode(
                    value, self._frame_rate, self._drop_frame
                )
            case WallClock(seconds_since_midnight=seconds):
                frame_count = self.seconds_to_frames(seconds)

        logger.debug(
            "timecode from %r: %s frames at %s fps", time, frame_count, self._frame_rate
        )
        self.frame_count = frame_count

    @staticmethod
    def _check_frame_rate(frame_rate: FrameRate | FrameRateLike, drop_frame: bool) -> FrameRate:
        if not frame_rate_supported(frame_rate, drop_frame):
            raise UnsupportedFrameRateError(f"Frame rate not supported: {frame_rate!r}")
        return FrameRate.coerce(frame_rate)

    @classmethod
    def from_seconds(
        cls,
        seconds: float | Fraction,
        frame_rate: FrameRate | FrameRateLike = DEFAULT_FRAME_RATE,
        drop_frame: bool = DEFAULT_DROP_FRAME,
    ) -> Timecode:
        """Create a new Timecode of the given seconds.

        Args:
            seconds (int | float | Fraction): The seconds, the frame count is
                truncated from ``seconds * frame_rate``.
            frame_rate (FrameRate | Fraction | str | int | float): The rate.
            drop_frame (bool): Whether to use drop frame counting.

        Raises:
            InvalidTimecodeError: If seconds is not a finite number.

        Returns:
            Timecode: The new Timecode instance.
        """
        if isinstance(seconds, bool) or not isinstance(seconds, numbers.Real):
            raise InvalidTimecodeError(
                f"seconds should be a number, not a {seconds.__class__.__name__}"
            )
        return cls(WallClock(seconds), frame_rate, drop_frame)

    @staticmethod
    def is_valid_timecode(
        time: object,
        frame_rate: FrameRate | FrameRateLike = DEFAULT_FRAME_RATE,
        drop_frame: bool = DEFAULT_DROP_FRAME,
    ) -> bool:
        """Determine if a Timecode can be created from the given arguments.

        Raises:
            UnsupportedDropFrameError: If drop frame is used with another frame
                rate than 29.97.
            NegativeValueError: If time is a negative integer.

        Returns:
            bool: True if time is a frame count, a valid timecode string at the
                given frame rate or a time of day.
        """
        Timecode._check_frame_rate(frame_rate, drop_frame)
        try:
            time_input = to_time_input(time)
        except InvalidTimecodeError:
            return False

        if isinstance(time_input, FrameCount):
            return is_valid_integer(time_input.frames)
        if isinstance(time_input, TimecodeString):
            return is_valid_string(time_input.value, frame_rate, drop_frame)
        return time_input.seconds_since_midnight >= 0

    @staticmethod
    def frame_count_from_timecode(
        timecode: str,
        frame_rate: FrameRate | FrameRateLike = DEFAULT_FRAME_RATE,
        drop_frame: bool = DEFAULT_DROP_FRAME,
    ) -> int:
        """Convert the given timecode string to frames.

        Args:
            timecode (str): A "HH:MM:SS:FF" or "HH:MM:SS;FF" string.
            frame_rate (FrameRate | Fraction | str | int | float): The rate.
            drop_frame (bool): Whether the string is a drop frame timecode.

        Raises:
            InvalidTimecodeError: If the string is not a valid timecode.

        Returns:
            int: The number of frames in the given timecode.
        """
        hours, minutes, seconds, frames = parse_timecode(timecode, frame_rate, drop_frame)
        return frame_count_from_fields(
            frame_rate, hours, minutes, seconds, frames, drop_frame
        )

    def seconds_to_frames(self, seconds: float | Fraction) -> int:
        """Return the number of frames in the given seconds at this frame rate.

        Args:
            seconds (float | Fraction): Non negative number of seconds.

        Raises:
            InvalidTimecodeError: If seconds is NaN or infinite.
            NegativeValueError: If seconds is negative.

        Returns:
            int: The truncated number of frames.
        """
        if not math.isfinite(seconds):
            raise InvalidTimecodeError(
                f"Seconds should be a finite number, got {seconds}."
            )
        if seconds < 0:
            raise NegativeValueError(f"Seconds can not be negative, got {seconds}.")
        return int(seconds * self._frame_rate.value)

    @property
    def frame_rate(self) -> FrameRate:
        """Return the frame rate of this Timecode."""
        return self._frame_rate

    @property
    def drop_frame(self) -> bool:
        """Return True if this is a drop frame Timecode."""
        return self._drop_frame

    @property
    def frame_count(self) -> int:
        """Return the number of frames this Timecode represents.

        Returns:
            int: The frame count.
        """
        return self._frame_count

    @frame_count.setter
    def frame_count(self, frame_count: int) -> None:
        """Set the frame count and update the timecode fields.

        Args:
            frame_count (int): A non negative int showing the number of frames
                that this Timecode represents.
        """
        # validate the frame count value
        if isinstance(frame_count, bool) or not isinstance(frame_count, int):
            raise InvalidTimecodeError(
                f"{self.__class__.__name__}.frame_count should be a non negative "
                f"integer, not a {frame_count.__class__.__name__}"
            )

        if frame_count < 0:
            raise NegativeValueError(
                f"{self.__class__.__name__}.frame_count can not be negative, "
                f"got {frame_count}"
            )

        self._frame_count = frame_count
        self._hours, self._minutes, self._seconds, self._frames = (
            fields_from_frame_count(self._frame_rate, frame_count, self._drop_frame)
        )

    def set_frame_count(self, frame_count: int) -> None:
        """Set the frame count, same as assigning :attr:`.frame_count`."""
        self.frame_count = frame_count

    def _set_fields(self, **fields: int) -> None:
        """Recompute the frame count with some of the fields replaced.

        Raises:
            OutOfRangeError: If the new fields name a frame skipped by drop
                frame counting.
        """
        hrs = fields.get("hours", self._hours)
        mins = fields.get("minutes", self._minutes)
        secs = fields.get("seconds", self._seconds)
        frs = fields.get("frames", self._frames)

        drop_frames = self._frame_rate.drop_frames if self._drop_frame else 0
        if is_skipped_frame(mins, secs, frs, drop_frames):
            raise OutOfRangeError(
                f"{format_timecode(hrs, mins, secs, frs, True)} does not exist in "
                "drop frame timecode"
            )

        self.frame_count = frame_count_from_fields(
            self._frame_rate, hrs, mins, secs, frs, self._drop_frame
        )

    @property
    def hours(self) -> int:
        """Return the hours part of the timecode.

        Returns:
            int: The hours part of the timecode.
        """
        return self._hours

    @hours.setter
    def hours(self, hours: int) -> None:
        self._set_fields(hours=validate_field("hours", hours, 24))

    @property
    def minutes(self) -> int:
        """Return the minutes part of the timecode.

        Returns:
            int: The minutes part of the timecode.
        """
        return self._minutes

    @minutes.setter
    def minutes(self, minutes: int) -> None:
        self._set_fields(minutes=validate_field("minutes", minutes, 60))

    @property
    def seconds(self) -> int:
        """Return the seconds part of the timecode.

        Returns:
            int: The seconds part of the timecode.
        """
        return self._seconds

    @seconds.setter
    def seconds(self, seconds: int) -> None:
        self._set_fields(seconds=validate_field("seconds", seconds, 60))

    @property
    def frames(self) -> int:
        """Return the frames part of the timecode.

        Returns:
            int: The frames part of the timecode.
        """
        return self._frames

    @frames.setter
    def frames(self, frames: int) -> None:
        upper = math.ceil(self._frame_rate.value)
        self._set_fields(frames=validate_field("frames", frames, upper))

    def to_string(self) -> str:
        """Return the "HH:MM:SS:FF" ("HH:MM:SS;FF" for drop frame) string."""
        return format_timecode(
            self._hours, self._minutes, self._seconds, self._frames, self._drop_frame
        )

    def add(self, time: object, direction: int = 1) -> Self:
        """Add a timecode or a frame count to this Timecode.

        Args:
            time (int | str | datetime.datetime | datetime.time | Timecode): The
                time to add, read at the frame rate of this Timecode.
            direction (int): Subtracts if negative, adds otherwise.

        Raises:
            TypeError: If time is a Timecode with another frame rate or drop
                frame setting.
            NegativeValueError: If the result would be negative. This Timecode
                is left unchanged.

        Returns:
            Timecode: Returns self.
        """
        direction = -1 if direction < 0 else 1

        if isinstance(time, Timecode) and (time.frame_rate, time.drop_frame) != (
            self._frame_rate,
            self._drop_frame,
        ):
            raise TypeError(
                f"Can not add {time!r} to {self!r}, frame rates differ"
            )

        other = Timecode(time, self._frame_rate, self._drop_frame)
        frame_count = self._frame_count + (other.frame_count * direction)
        if frame_count < 0:
            raise NegativeValueError(
                f"Can not subtract {other} from {self}, the result is negative."
            )

        self.frame_count = frame_count
        return self

    def subtract(self, time: object) -> Self:
        """Subtract a timecode or a frame count from this Timecode.

        Args:
            time (int | str | datetime.datetime | datetime.time | Timecode): The
                time to subtract.

        Returns:
            Timecode: Returns self.
        """
        return self.add(time, -1)

    def next(self) -> Self:
        """Add one frame to this Timecode to go the next frame.

        Returns:
            Timecode: Returns self. So, this is the same Timecode instance with this
                one.
        """
        return self.add(1)

    def back(self) -> Self:
        """Subtract one frame from this Timecode to go back one frame.

        Returns:
            Timecode: Returns self. So, this is the same Timecode instance with this
                one.
        """
        return self.subtract(1)

    def copy(self) -> Timecode:
        """Return a new Timecode with the same frame count and settings."""
        return Timecode(self._frame_count, self._frame_rate, self._drop_frame)

    def duration_in_seconds_fractional(self) -> Fraction:
        """Return the exact duration of this Timecode.

        Returns:
            Fraction: ``frame_count / frame_rate`` in seconds.
        """
        return Fraction(self._frame_count) / self._frame_rate.value

    def duration_in_seconds(self) -> int:
        """Return the duration of this Timecode in whole seconds, truncated."""
        return math.floor(self.duration_in_seconds_fractional())

    def duration_in_seconds_rounded(self) -> int:
        """Return the duration rounded to the nearest second, halves up."""
        return math.floor(self.duration_in_seconds_fractional() + Fraction(1, 2))

    def duration_in_seconds_rounded_min_one(self) -> int:
        """Return the rounded duration, but at least 1 for a non zero Timecode."""
        if self._frame_count == 0:
            return 0
        return max(1, self.duration_in_seconds_rounded())

    def duration_in_seconds_ceil(self) -> int:
        """Return the duration of this Timecode rounded up to whole seconds."""
        return math.ceil(self.duration_in_seconds_fractional())

    def _comparable_frames(self, other: object, op: str) -> int:
        """Return the frame count to compare this Timecode against.

        Args:
            other (int | str | Timecode): Either and int representing the
                number of frames, a str representing a Timecode with the same
                frame rate of this one, or a Timecode with the same frame rate
                and drop frame setting.

        Raises:
            TypeError: If other can not be compared with this Timecode.
        """
        if isinstance(other, Timecode):
            if (other.frame_rate, other.drop_frame) != (self._frame_rate, self._drop_frame):
                raise TypeError(
                    f"'{op}' not supported between Timecodes of different frame rates"
                )
            return other.frame_count
        if isinstance(other, str):
            return Timecode(other, self._frame_rate, self._drop_frame).frame_count
        if isinstance(other, int) and not isinstance(other, bool):
            return other
        raise TypeError(
            f"'{op}' not supported between instances of 'Timecode' and "
            f"'{other.__class__.__name__}'"
        )

    def __eq__(self, other: object) -> bool:
        """Override the equality operator.

        Args:
            other (int | str | Timecode): Either and int representing the
                number of frames, a str representing the start time of a
                Timecode with the same frame rate of this one, or a Timecode to
                compare with the number of frames.

        Returns:
            bool: True if the other is equal to this Timecode instance.
        """
        if isinstance(other, Timecode):
            return (
                self._frame_rate == other.frame_rate
                and self._drop_frame == other.drop_frame
                and self._frame_count == other.frame_count
            )
        if isinstance(other, (int, str)) and not isinstance(other, bool):
            return self._frame_count == self._comparable_frames(other, "==")
        return NotImplemented

    def __ge__(self, other: int | str | Timecode) -> bool:
        return self._frame_count >= self._comparable_frames(other, ">=")

    def __gt__(self, other: int | str | Timecode) -> bool:
        return self._frame_count > self._comparable_frames(other, ">")

    def __le__(self, other: int | str | Timecode) -> bool:
        return self._frame_count <= self._comparable_frames(other, "<=")

    def __lt__(self, other: int | str | Timecode) -> bool:
        return self._frame_count < self._comparable_frames(other, "<")

    def __add__(self, other: int | str | Timecode) -> Timecode:
        """Return a new Timecode with the given timecode or frames added to this one.

        Args:
            other (int | str | Timecode): Either and int value, a timecode
                string or a Timecode in which the frames are used for the
                calculation.

        Returns:
            Timecode: The resultant Timecode instance.
        """
        return self.copy().add(other)

    def __sub__(self, other: int | str | Timecode) -> Timecode:
        """Return a new Timecode instance with subtracted value.

        Args:
            other (int | str | Timecode): The value to subtract.

        Raises:
            NegativeValueError: If other is bigger than this Timecode.

        Returns:
            Timecode: The resultant Timecode instance.
        """
        return self.copy().subtract(other)

    def __int__(self) -> int:
        return self._frame_count

    def __float__(self) -> float:
        """Convert this Timecode instance to a float representation (seconds).

        Returns:
            float: The float representation (seconds).
        """
        return float(self.duration_in_seconds_fractional())

    def __str__(self) -> str:
        """Return the actual Timecode as a string.

        Returns:
            str: The string of this Timecode.
        """
        return self.to_string()

    def __repr__(self) -> str:
        """Return the string representation of this Timecode instance.

        Returns:
            str: The string representation of this Timecode instance.
        """
        # use the frame count as that is agnostic to drop_frame
        return (
            f"{__class__.__name__}({self._frame_count}, "
            f"frame_rate='{self._frame_rate}', drop_frame={self._drop_frame})"
        )
####

#%%
class TimecodeBuilder:
    """Helper class to pre-configure instantiation of Timecodes.

    Holds the frame rate and drop frame setting shared by the Timecodes it
    creates, so callers keep their own defaults instead of changing a global
    one.

    Args:
        frame_rate (FrameRate | Fraction | str | int | float): The frame rate
            of the Timecodes created by this builder.
        drop_frame (bool): The drop frame setting of the Timecodes created by
            this builder.
    """

    def __init__(
        self,
        frame_rate: FrameRate | FrameRateLike = DEFAULT_FRAME_RATE,
        drop_frame: bool = DEFAULT_DROP_FRAME,
    ) -> None:
        self.kwargs = {
            "frame_rate": Timecode._check_frame_rate(frame_rate, drop_frame),
            "drop_frame": bool(drop_frame),
        }

    @property
    def frame_rate(self) -> FrameRate:
        return self.kwargs["frame_rate"]

    @property
    def drop_frame(self) -> bool:
        return self.kwargs["drop_frame"]

    def __call__(self, time: object = 0, **kwargs) -> Timecode:
        """Create a Timecode combining the preconfigured and user arguments.

        Returns:
            Timecode: timecode instance given the arguments.
        """
        kwargs = self.kwargs | kwargs
        return Timecode(time, **kwargs)

    def from_seconds(self, seconds: float | Fraction) -> Timecode:
        """Create a Timecode of the given seconds with the builder settings."""
        return Timecode.from_seconds(seconds, **self.kwargs)
####
