"""Tests for the cleaning history parsers."""

from datetime import datetime, timedelta, timezone

from miio_vacuum.history import parse_clean_record, parse_history_day, to_timestamp


def test_to_timestamp_floors_fractional_seconds() -> None:
    """Sub-second parts are dropped."""

    moment = datetime(2017, 3, 1, tzinfo=timezone.utc) + timedelta(milliseconds=900)

    assert to_timestamp(moment) == 1488326400
    assert to_timestamp(1488326400.9) == 1488326400


def test_parse_clean_record_units() -> None:
    """Areas become m² and the completion flag a boolean."""

    record = parse_clean_record([1488347071, 1488347123, 52, 26000000, 0, 1])

    assert record.area == 26.0
    assert record.complete is True
    assert record.end - record.start == timedelta(seconds=52)


def test_history_day_reports_normalised_day() -> None:
    """The day is reported as a UTC datetime whatever the input form."""

    history = parse_history_day(1488326400, [])

    assert history.day == datetime(2017, 3, 1, tzinfo=timezone.utc)
    assert history.history == []
