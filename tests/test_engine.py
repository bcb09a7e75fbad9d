import pytest

from smpte_timecode import (
    FrameRate,
    NegativeValueError,
    UnsupportedDropFrameError,
    drop_frame_constants,
    fields_from_frame_count,
    format_timecode,
    frame_count_from_fields,
    frames_per_day,
)


@pytest.mark.parametrize(
    "rate, expected",
    [
        (FrameRate.FR_29_97, (2, 1798, 17982)),
        (FrameRate.FR_59_94, (4, 3596, 35964)),
    ],
)
def test_drop_frame_constants(rate, expected):
    assert drop_frame_constants(rate) == expected


@pytest.mark.parametrize("rate", [FrameRate.FR_23_976, 24, 25, 30, 50, 60])
def test_drop_frame_constants_non_ntsc(rate):
    with pytest.raises(UnsupportedDropFrameError):
        drop_frame_constants(rate)


@pytest.mark.parametrize(
    "rate, drop_frame, expected",
    [
        (24, False, 2073600),
        (25, False, 2160000),
        (30, False, 2592000),
        (FrameRate.FR_29_97, False, 2592000),
        (FrameRate.FR_29_97, True, 2589408),
        (FrameRate.FR_59_94, True, 5178816),
    ],
)
def test_frames_per_day(rate, drop_frame, expected):
    assert frames_per_day(rate, drop_frame) == expected


@pytest.mark.parametrize(
    "rate, fields, drop_frame, expected",
    [
        (25, (0, 0, 20, 0), False, 500),
        (24, (0, 6, 56, 16), False, 10000),
        (30, (0, 5, 33, 10), False, 10000),
        (FrameRate.FR_29_97, (0, 5, 33, 10), False, 10000),
        (FrameRate.FR_29_97, (0, 5, 33, 20), True, 10000),
        (FrameRate.FR_29_97, (0, 0, 59, 29), True, 1799),
        (FrameRate.FR_29_97, (0, 1, 0, 2), True, 1800),
        (FrameRate.FR_29_97, (0, 10, 0, 0), True, 17982),
        (FrameRate.FR_29_97, (1, 0, 0, 0), True, 107892),
        (FrameRate.FR_29_97, (23, 59, 59, 29), True, 2589407),
        (FrameRate.FR_59_94, (0, 1, 0, 4), True, 3600),
        (FrameRate.FR_59_94, (0, 10, 0, 0), True, 35964),
    ],
)
def test_frame_count_from_fields(rate, fields, drop_frame, expected):
    assert frame_count_from_fields(rate, *fields, drop_frame=drop_frame) == expected


@pytest.mark.parametrize(
    "rate, frame_count, drop_frame, expected",
    [
        (25, 500, False, (0, 0, 20, 0)),
        (24, 10000, False, (0, 6, 56, 16)),
        (FrameRate.FR_23_976, 10000, False, (0, 6, 56, 16)),
        (FrameRate.FR_29_97, 10000, False, (0, 5, 33, 10)),
        (FrameRate.FR_29_97, 10000, True, (0, 5, 33, 20)),
        (FrameRate.FR_29_97, 0, True, (0, 0, 0, 0)),
        (FrameRate.FR_29_97, 1, True, (0, 0, 0, 1)),
        (FrameRate.FR_29_97, 1799, True, (0, 0, 59, 29)),
        (FrameRate.FR_29_97, 1800, True, (0, 1, 0, 2)),
        (FrameRate.FR_29_97, 17981, True, (0, 9, 59, 29)),
        (FrameRate.FR_29_97, 17982, True, (0, 10, 0, 0)),
        (FrameRate.FR_29_97, 17983, True, (0, 10, 0, 1)),
        (FrameRate.FR_29_97, 19782, True, (0, 11, 0, 2)),
        (FrameRate.FR_29_97, 2589407, True, (23, 59, 59, 29)),
        (FrameRate.FR_59_94, 3596, True, (0, 0, 59, 56)),
        (FrameRate.FR_59_94, 3600, True, (0, 1, 0, 4)),
        (FrameRate.FR_59_94, 35964, True, (0, 10, 0, 0)),
    ],
)
def test_fields_from_frame_count(rate, frame_count, drop_frame, expected):
    assert fields_from_frame_count(rate, frame_count, drop_frame) == expected


@pytest.mark.parametrize(
    "rate, drop_frame",
    [(24, False), (30, False), (FrameRate.FR_29_97, True)],
)
def test_hours_roll_over_after_a_day(rate, drop_frame):
    day = frames_per_day(rate, drop_frame)
    assert fields_from_frame_count(rate, day, drop_frame) == (0, 0, 0, 0)
    assert fields_from_frame_count(rate, day + 5, drop_frame) == (0, 0, 0, 5)


def test_fields_from_negative_frame_count():
    with pytest.raises(NegativeValueError):
        fields_from_frame_count(24, -1)


@pytest.mark.parametrize(
    "rate, drop_frame",
    [
        (FrameRate.FR_25, False),
        (FrameRate.FR_29_97, False),
        (FrameRate.FR_29_97, True),
        (FrameRate.FR_59_94, True),
    ],
)
def test_round_trip_and_monotonicity(rate, drop_frame):
    previous = None
    for frame_count in range(0, 40000, 3):
        fields = fields_from_frame_count(rate, frame_count, drop_frame)
        assert frame_count_from_fields(rate, *fields, drop_frame=drop_frame) == frame_count
        if previous is not None:
            assert fields > previous
        previous = fields


def test_drop_frame_full_day_sweep():
    rate = FrameRate.FR_29_97
    last = frames_per_day(rate, True) - 1
    previous = None
    for frame_count in [*range(0, last, 997), last]:
        fields = fields_from_frame_count(rate, frame_count, True)
        assert frame_count_from_fields(rate, *fields, drop_frame=True) == frame_count
        if previous is not None:
            assert fields > previous
        previous = fields

    assert previous == (23, 59, 59, 29)
    assert fields_from_frame_count(rate, last + 1, True) == (0, 0, 0, 0)


def test_drop_frame_never_yields_skipped_frames():
    for frame_count in range(0, 2 * 17982):
        _, minutes, seconds, frames = fields_from_frame_count(
            FrameRate.FR_29_97, frame_count, True
        )
        if minutes % 10 and seconds == 0:
            assert frames >= 2


@pytest.mark.parametrize(
    "fields, drop_frame, expected",
    [
        ((0, 0, 0, 0), False, "00:00:00:00"),
        ((1, 2, 3, 4), False, "01:02:03:04"),
        ((0, 5, 33, 20), True, "00:05:33;20"),
        ((23, 59, 59, 59), False, "23:59:59:59"),
    ],
)
def test_format_timecode(fields, drop_frame, expected):
    assert format_timecode(*fields, drop_frame=drop_frame) == expected
