from fractions import Fraction

import pytest

from smpte_timecode import (
    FrameRate,
    UnsupportedDropFrameError,
    UnsupportedFrameRateError,
    frame_rate_supported,
)


@pytest.mark.parametrize(
    "frame_rate, expected",
    [
        (FrameRate.FR_23_976, Fraction(24000, 1001)),
        (FrameRate.FR_24, 24),
        (FrameRate.FR_25, 25),
        (FrameRate.FR_29_97, Fraction(30000, 1001)),
        (FrameRate.FR_30, 30),
        (FrameRate.FR_50, 50),
        (FrameRate.FR_59_94, Fraction(60000, 1001)),
        (FrameRate.FR_60, 60),
    ],
)
def test_frame_rate_values(frame_rate, expected):
    assert frame_rate.value == expected


@pytest.mark.parametrize(
    "value, expected",
    [
        (FrameRate.FR_25, FrameRate.FR_25),
        (24, FrameRate.FR_24),
        (25.0, FrameRate.FR_25),
        ("30", FrameRate.FR_30),
        (29.97, FrameRate.FR_29_97),
        ("29.97", FrameRate.FR_29_97),
        ("30000/1001", FrameRate.FR_29_97),
        ((60000, 1001), FrameRate.FR_59_94),
        (Fraction(24000, 1001), FrameRate.FR_23_976),
        (23.976, FrameRate.FR_23_976),
        (23.98, FrameRate.FR_23_976),
        (23.97, FrameRate.FR_23_976),
        (59.94, FrameRate.FR_59_94),
    ],
)
def test_coerce(value, expected):
    assert FrameRate.coerce(value) is expected


@pytest.mark.parametrize(
    "value",
    [
        0, 1, 22, 23, 26, 35, 100, 10000, 24.5, -24, "abc", None, True, (1, 0),
        float("inf"), float("nan"), "inf",
    ],
)
def test_coerce_unsupported(value):
    with pytest.raises(UnsupportedFrameRateError):
        FrameRate.coerce(value)


def test_unsupported_frame_rate_is_a_value_error():
    with pytest.raises(ValueError):
        FrameRate.coerce(26)


@pytest.mark.parametrize(
    "frame_rate, int_framerate, is_ntsc, drop_frames, name",
    [
        (FrameRate.FR_23_976, 24, True, 0, "23.976"),
        (FrameRate.FR_24, 24, False, 0, "24"),
        (FrameRate.FR_25, 25, False, 0, "25"),
        (FrameRate.FR_29_97, 30, True, 2, "29.97"),
        (FrameRate.FR_30, 30, False, 0, "30"),
        (FrameRate.FR_50, 50, False, 0, "50"),
        (FrameRate.FR_59_94, 60, True, 4, "59.94"),
        (FrameRate.FR_60, 60, False, 0, "60"),
    ],
)
def test_frame_rate_properties(frame_rate, int_framerate, is_ntsc, drop_frames, name):
    assert frame_rate.int_framerate == int_framerate
    assert frame_rate.is_ntsc is is_ntsc
    assert frame_rate.drop_frames == drop_frames
    assert str(frame_rate) == name


def test_float():
    assert float(FrameRate.FR_29_97) == pytest.approx(29.97, abs=1e-3)


@pytest.mark.parametrize("rate", [23.97, 24, 25, 29.97, 30, 50, 59.94, 60])
def test_frame_rate_supported(rate):
    assert frame_rate_supported(rate, False) is True


@pytest.mark.parametrize("rate", [23, 26, 1, 35, 100])
def test_frame_rate_not_supported(rate):
    assert frame_rate_supported(rate, False) is False


def test_drop_frame_supported_at_29_97():
    assert frame_rate_supported(FrameRate.FR_29_97, True) is True
    assert frame_rate_supported("29.97", True) is True


@pytest.mark.parametrize("rate", [23.97, 24, 25, 30, 50, 59.94, 60, 26])
def test_drop_frame_not_supported(rate):
    with pytest.raises(UnsupportedDropFrameError):
        frame_rate_supported(rate, True)
