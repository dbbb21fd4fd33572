from datetime import date

import pytest

from app.core.utils import (
    arrival_urgency,
    container_count,
    days_to_arrival,
    parse_iso_date,
    transit_progress,
)

TODAY = date(2024, 1, 10)


def test_parse_iso_date_accepts_dates_and_datetimes():
    assert parse_iso_date("2024-03-01") == date(2024, 3, 1)
    assert parse_iso_date("2024-03-01T18:30:00") == date(2024, 3, 1)
    assert parse_iso_date("2024-03-01T18:30:00Z") == date(2024, 3, 1)
    assert parse_iso_date(None) is None
    assert parse_iso_date("") is None
    with pytest.raises(ValueError):
        parse_iso_date("01/03/2024")


@pytest.mark.parametrize("value", ["20240301", "2024-W09-5", "2024-061", "2024-03-01 10:00", "2024-03-01\n"])
def test_parse_iso_date_rejects_non_extended_forms(value):
    with pytest.raises(ValueError):
        parse_iso_date(value)


def test_parse_iso_date_treats_whitespace_as_empty():
    assert parse_iso_date("   ") is None


def test_days_to_arrival():
    assert days_to_arrival("2024-01-20", TODAY) == 10
    assert days_to_arrival("2024-01-10", TODAY) == 0
    assert days_to_arrival("2024-01-05T08:00:00", TODAY) == -5
    assert days_to_arrival(None, TODAY) is None


@pytest.mark.parametrize(
    "days, expected",
    [(None, 0.0), (-3, 100.0), (0, 100.0), (15, 50.0), (30, 0.0), (45, 0.0), (27, 10.0)],
)
def test_transit_progress(days, expected):
    assert transit_progress(days) == pytest.approx(expected)


@pytest.mark.parametrize(
    "days, expected",
    [(None, "unknown"), (-1, "urgent"), (10, "urgent"), (11, "medium"), (20, "medium"), (21, "normal")],
)
def test_arrival_urgency(days, expected):
    assert arrival_urgency(days) == expected


@pytest.mark.parametrize(
    "number, expected",
    [("101-104", 4), ("7-7", 1), ("MSCU1234567", 1), ("MSKU-123", 1), ("9-3", 1), ("1-2-3", 1)],
)
def test_container_count(number, expected):
    assert container_count(number) == expected
