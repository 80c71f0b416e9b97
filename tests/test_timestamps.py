from datetime import datetime, timedelta, timezone

import pytest

from repositories.exceptions import TimestampConversionError
from utils.timestamps import format_wire_timestamp, to_wire_timestamp


@pytest.mark.parametrize(
    "stored, expected",
    [
        ("2026-10-19T14:30:00Z", datetime(2026, 10, 19, 14, 30, tzinfo=timezone.utc)),
        ("2026-10-19T14:30:00+02:00", datetime(2026, 10, 19, 12, 30, tzinfo=timezone.utc)),
        ("2026-10-19T14:30:00.250Z", datetime(2026, 10, 19, 14, 30, 0, 250000, tzinfo=timezone.utc)),
        (
            datetime(2026, 10, 19, 14, 30, tzinfo=timezone(timedelta(hours=-5))),
            datetime(2026, 10, 19, 19, 30, tzinfo=timezone.utc),
        ),
    ],
)
def test_to_wire_timestamp_normalizes_to_utc(stored, expected):
    converted = to_wire_timestamp(stored)

    assert converted == expected
    assert converted.tzinfo == timezone.utc


def test_naive_stored_time_is_read_as_local_time():
    naive = datetime(2026, 10, 19, 14, 30)

    assert to_wire_timestamp("2026-10-19T14:30:00") == naive.astimezone(timezone.utc)


@pytest.mark.parametrize("stored", [None, "", "not a date", "2026-13-45T99:00:00Z", 1760884200])
def test_unconvertible_values_raise(stored):
    with pytest.raises(TimestampConversionError):
        to_wire_timestamp(stored)


def test_format_wire_timestamp():
    assert format_wire_timestamp(datetime(2026, 10, 19, 14, 30, tzinfo=timezone.utc)) == "2026-10-19T14:30:00Z"
    assert (
        format_wire_timestamp(datetime(2026, 10, 19, 14, 30, 0, 500000, tzinfo=timezone.utc))
        == "2026-10-19T14:30:00.5Z"
    )


def test_formatted_timestamp_converts_back_to_same_instant():
    instant = datetime(2026, 3, 1, 23, 59, 59, tzinfo=timezone(timedelta(hours=11)))

    assert to_wire_timestamp(format_wire_timestamp(instant)) == instant
