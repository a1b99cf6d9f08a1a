import pytest

from form_builder.formats import detect_format, is_date, is_date_time, is_email


@pytest.mark.parametrize("value", ["user@example.com", "admin@test.org", "john.doe@example.co.uk"])
def test_email_detected(value):
    assert is_email(value)
    assert detect_format(value) == "email"


@pytest.mark.parametrize("value", ["notanemail", "@example.com", "user@", "user example.com", "a@b@c.com"])
def test_not_email(value):
    assert not is_email(value)
    assert detect_format(value) is None


def test_date_time_with_and_without_offset():
    assert detect_format("2024-01-15T10:30:00") == "date-time"
    assert detect_format("2024-01-15T10:30:00Z") == "date-time"
    assert detect_format("2024-01-15T10:30:00+05:30") == "date-time"
    assert detect_format("2024-01-15T10:30:00-08:00") == "date-time"
    # fractional seconds are not part of the accepted pattern
    assert detect_format("2024-01-15T10:30:00.123Z") is None


def test_iso_date_is_range_checked_loosely():
    assert detect_format("1990-05-15") == "date"
    assert detect_format("2024-02-31") == "date"
    assert not is_date("2024-13-45")
    assert not is_date("2024-00-10")
    assert not is_date("2024-01-00")
    assert detect_format("2024-13-45") is None


def test_slash_and_day_first_dates():
    assert detect_format("01/15/2024") == "date"
    assert detect_format("15-01-2024") == "date"
    # no value-range check on these forms
    assert detect_format("99/99/2024") == "date"


def test_non_dates():
    assert detect_format("January 15, 2024") is None
    assert detect_format("15/2024/01") is None
    assert not is_date_time("2024-01-15")


def test_numeric_strings_get_no_format():
    for value in ("12345", "00123", "5551234567"):
        assert detect_format(value) is None


def test_whole_string_must_match():
    assert detect_format("1990-05-15\n") is None
    assert detect_format(" user@example.com") is None
    assert detect_format("on 2024-01-15") is None


def test_email_takes_priority_over_dates():
    # a string can only satisfy one pattern in practice; order is email first
    assert detect_format("2024-01-15@example.com") == "email"
