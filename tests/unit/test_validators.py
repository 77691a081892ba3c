from datetime import datetime, timezone

import pytest

from charity.utils.validators import is_email, parse_limit, parse_timestamp


@pytest.mark.parametrize(
    "raw, expected",
    [
        (None, 1000),
        ("", 1000),
        ("abc", 1000),
        ("0", 1000),
        ("-3", 1000),
        ("9000", 1000),
        ("nan", 1000),
        ("25", 25),
        ("25.7", 25),
        ("5000", 5000),
    ],
)
def test_parse_limit_with_maximum(raw, expected):
    assert parse_limit(raw, 1000, 5000) == expected


def test_parse_limit_without_maximum():
    assert parse_limit("500", 5) == 500
    assert parse_limit("soon", 5) == 5


def test_parse_timestamp():
    assert parse_timestamp("2024-03-01T10:00:00Z") == datetime(2024, 3, 1, 10, tzinfo=timezone.utc)
    assert parse_timestamp("2024-03-01") == datetime(2024, 3, 1)
    assert parse_timestamp("yesterday") is None
    assert parse_timestamp("  ") is None
    assert parse_timestamp(None) is None


def test_is_email():
    assert is_email("Ali@Example.com")
    assert not is_email("ali@x..com")
    assert not is_email("not-an-email")
