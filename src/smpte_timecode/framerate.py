"""Broadcast frame rates supported by the Timecode class."""

from __future__ import annotations

import logging
import sys
from enum import Enum
from fractions import Fraction

from .errors import UnsupportedDropFrameError, UnsupportedFrameRateError

if sys.version_info >= (3, 11):
    _frate_type = Fraction | str | int | float | tuple[int, int]
else:
    from typing import Union
    _frate_type = Union[Fraction, str, int, float, tuple[int, int]]

logger = logging.getLogger(__name__)

# Anything accepted by FrameRate.coerce().
FrameRateLike = _frate_type

# Loose inputs such as 23.97 or 29.97 snap to the closest NTSC rate.
_NTSC_TOLERANCE = Fraction(1, 100)


class FrameRate(Enum):
    """The supported frame rates, NTSC rates held as exact fractions."""

    FR_23_976 = Fraction(24000, 1001)
    FR_24 = Fraction(24)
    FR_25 = Fraction(25)
    FR_29_97 = Fraction(30000, 1001)
    FR_30 = Fraction(30)
    FR_50 = Fraction(50)
    FR_59_94 = Fraction(60000, 1001)
    FR_60 = Fraction(60)

    @classmethod
    def coerce(cls, value: FrameRate | FrameRateLike) -> FrameRate:
        """Return the FrameRate member matching the given value.

        Args:
            value (FrameRate | Fraction | str | int | float | tuple): The frame
                rate. Strings can be decimal ("29.97") or a ratio
                ("30000/1001"), tuples are read as (numerator, denominator).
                Non integer values close to an NTSC rate resolve to it, so
                23.97, 23.98 and 29.97 are all accepted.

        Raises:
            UnsupportedFrameRateError: If the value is not one of the
                supported frame rates.

        Returns:
            FrameRate: The matching frame rate.
        """
        if isinstance(value, cls):
            return value

        if isinstance(value, bool):
            raise UnsupportedFrameRateError(f"Frame rate not supported: {value!r}")

        try:
            if isinstance(value, (tuple, list)):
                fps = Fraction(*map(int, value))
            else:
                fps = Fraction(value)
        except (TypeError, ValueError, ZeroDivisionError, OverflowError) as exc:
            raise UnsupportedFrameRateError(
                f"Frame rate not supported: {value!r}"
            ) from exc

        for member in cls:
            if fps == member.value:
                return member

        if fps.denominator != 1:
            for member in cls:
                if member.is_ntsc and abs(fps - member.value) < _NTSC_TOLERANCE:
                    return member

        raise UnsupportedFrameRateError(f"Frame rate not supported: {value!r}")

    @property
    def int_framerate(self) -> int:
        """Return the nominal (rounded) frame rate, e.g. 30 for 29.97."""
        return round(self.value)

    @property
    def is_ntsc(self) -> bool:
        """Return True for the 1000/1001 rates."""
        return self.value.denominator == 1001

    @property
    def drop_frames(self) -> int:
        """Return the number of frame numbers skipped per dropped minute.

        Returns:
            int: 2 for 29.97, 4 for 59.94 and 0 for the other rates.
        """
        if not self.is_ntsc or self.int_framerate % 30:
            return 0
        # Number of drop frames is 6% of framerate rounded to nearest integer
        return round(float(self.value) * 0.066666)

    def __float__(self) -> float:
        return float(self.value)

    def __str__(self) -> str:
        return self.name[3:].replace("_", ".")


# Drop frame is only allowed at 29.97 fps.
DROP_FRAME_RATES = frozenset({FrameRate.FR_29_97})


def frame_rate_supported(rate: FrameRate | FrameRateLike, drop_frame: bool = False) -> bool:
    """Check whether the frame rate and drop frame combination is supported.

    Args:
        rate (FrameRate | Fraction | str | int | float | tuple): The rate.
        drop_frame (bool): Whether drop frame counting is requested.

    Raises:
        UnsupportedDropFrameError: If drop frame is requested for any rate other
            than 29.97.

    Returns:
        bool: True if the rate is one of the supported frame rates.
    """
    try:
        frame_rate = FrameRate.coerce(rate)
    except UnsupportedFrameRateError:
        logger.debug("unsupported frame rate %r", rate)
        frame_rate = None

    if drop_frame and frame_rate not in DROP_FRAME_RATES:
        raise UnsupportedDropFrameError(
            f"Only 29.97 frame rate has drop frame support, got {rate!r}."
        )

    return frame_rate is not None
