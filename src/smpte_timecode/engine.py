"""Conversions between frame counts, timecode fields and timecode strings.

All the functions in this module are pure. The frame rate argument can be a
:class:`.FrameRate` or anything :meth:`.FrameRate.coerce` accepts.

Drop frame counting skips the frame numbers 00 and 01 (00 to 03 at 59.94) at
the start of every minute, except for the minutes divisible by ten, so that
the timecode keeps up with the wall clock at the NTSC rates.
"""

from __future__ import annotations

from .errors import NegativeValueError, UnsupportedDropFrameError
from .framerate import FrameRate, FrameRateLike


def drop_frame_constants(rate: FrameRate | FrameRateLike) -> tuple[int, int, int]:
    """Return the drop frame block sizes of the given frame rate.

    Args:
        rate (FrameRate | FrameRateLike): 29.97 or 59.94.

    Raises:
        UnsupportedDropFrameError: If the rate has no drop frame counting.

    Returns:
        tuple: (drop_frames, frames_per_minute, frames_per_10_minutes), where
            frames_per_minute is the length of a dropped minute. That is
            (2, 1798, 17982) at 29.97 and (4, 3596, 35964) at 59.94.
    """
    frame_rate = FrameRate.coerce(rate)
    drop_frames = frame_rate.drop_frames
    if not drop_frames:
        raise UnsupportedDropFrameError(
            f"{frame_rate} fps has no drop frame counting."
        )

    ifps = frame_rate.int_framerate
    frames_per_minute = ifps * 60 - drop_frames
    frames_per_10_minutes = ifps * 60 * 10 - drop_frames * 9
    return drop_frames, frames_per_minute, frames_per_10_minutes


def frames_per_day(rate: FrameRate | FrameRateLike, drop_frame: bool = False) -> int:
    """Return the number of frames between 00:00:00:00 and 24:00:00:00."""
    if drop_frame:
        _, _, frames_per_10_minutes = drop_frame_constants(rate)
        return frames_per_10_minutes * 6 * 24
    return FrameRate.coerce(rate).int_framerate * 60 * 60 * 24


def frame_count_from_fields(
    rate: FrameRate | FrameRateLike,
    hours: int,
    minutes: int,
    seconds: int,
    frames: int,
    drop_frame: bool = False,
) -> int:
    """Convert timecode fields to a frame count.

    Args:
        rate (FrameRate | FrameRateLike): The frame rate.
        hours (int): Hours, 0 to 23.
        minutes (int): Minutes, 0 to 59.
        seconds (int): Seconds, 0 to 59.
        frames (int): Frames, 0 to the nominal frame rate exclusive.
        drop_frame (bool): If True the fields are read as a drop frame
            timecode.

    Returns:
        int: The number of frames since 00:00:00:00.
    """
    ifps = FrameRate.coerce(rate).int_framerate

    frame_count = (
        (ifps * 60 * 60 * hours)
        + (ifps * 60 * minutes)
        + (ifps * seconds)
        + frames
    )

    if drop_frame:
        drop_frames, _, _ = drop_frame_constants(rate)
        total_minutes = (60 * hours) + minutes
        frame_count -= drop_frames * (total_minutes - (total_minutes // 10))

    return frame_count


def fields_from_frame_count(
    rate: FrameRate | FrameRateLike, frame_count: int, drop_frame: bool = False
) -> tuple[int, int, int, int]:
    """Convert a frame count to timecode fields.

    Hours roll over after 24 hours.

    Args:
        rate (FrameRate | FrameRateLike): The frame rate.
        frame_count (int): The number of frames since 00:00:00:00.
        drop_frame (bool): If True, return the drop frame timecode fields.

    Raises:
        NegativeValueError: If the frame count is negative.

    Returns:
        tuple: A tuple containing the hours, minutes, seconds and frames.
    """
    if frame_count < 0:
        raise NegativeValueError(f"Frame count can not be negative, got {frame_count}.")

    ifps = FrameRate.coerce(rate).int_framerate
    frame_number = frame_count

    if drop_frame:
        drop_frames, frames_per_minute, frames_per_10_minutes = (
            drop_frame_constants(rate)
        )
        d, m = divmod(frame_count, frames_per_10_minutes)
        # the first frames of a ten minute block are never preceded by a gap
        if m < drop_frames:
            m += drop_frames
        frame_number += (drop_frames * 9 * d) + drop_frames * (
            (m - drop_frames) // frames_per_minute
        )

    frs = frame_number % ifps
    total_seconds = frame_number // ifps
    secs = total_seconds % 60
    mins = (total_seconds // 60) % 60
    hrs = (total_seconds // 3600) % 24

    return hrs, mins, secs, frs


def format_timecode(
    hours: int, minutes: int, seconds: int, frames: int, drop_frame: bool = False
) -> str:
    """Return the string representation of the given timecode fields.

    Args:
        hours (int): The hours portion of the Timecode.
        minutes (int): The minutes portion of the Timecode.
        seconds (int): The seconds portion of the Timecode.
        frames (int): The frames portion of the Timecode.
        drop_frame (bool): If True, ";" separates the seconds and frames.

    Returns:
        str: "HH:MM:SS:FF", or "HH:MM:SS;FF" for drop frame.
    """
    delimiter = ";" if drop_frame else ":"
    return f"{hours:02d}:{minutes:02d}:{seconds:02d}{delimiter}{frames:02d}"
