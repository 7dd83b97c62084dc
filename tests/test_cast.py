"""Tests for polyval.cast and polyval.formats modules."""

import datetime
import re

import pytest

from polyval import cast, formats


def test_as_datetime_naive_datetime():
    """Test that naive datetimes are kept."""
    value = datetime.datetime(2024, 1, 1, 12)
    assert cast.as_datetime(value) == value


def test_as_datetime_aware_datetime():
    """Test that aware datetimes are moved to UTC."""
    value = datetime.datetime(2024, 1, 1, 12, tzinfo=datetime.timezone(datetime.timedelta(hours=-5)))
    assert cast.as_datetime(value) == datetime.datetime(2024, 1, 1, 17)


def test_as_datetime_text_and_timestamp():
    """Test ISO text and POSIX timestamps."""
    assert cast.as_datetime("2024-01-01T00:00:00Z") == datetime.datetime(2024, 1, 1)
    assert cast.as_datetime(0) == datetime.datetime(1970, 1, 1)
    assert cast.as_datetime(1.5) == datetime.datetime(1970, 1, 1, 0, 0, 1, 500000)


def test_as_datetime_other_values():
    """Test that other values are returned unchanged."""
    assert cast.as_datetime(None) is None
    assert cast.as_datetime(True) is True


def test_as_datetime_invalid_text():
    """Test that non-ISO text is rejected."""
    with pytest.raises(ValueError):
        cast.as_datetime("next tuesday")


def test_is_iso_datetime():
    """Test ISO-8601 date and time detection."""
    assert cast.is_iso_datetime("2024-01-01T10:30:00")
    assert cast.is_iso_datetime("2024-01-01T10:30:00.123+02:00")
    assert not cast.is_iso_datetime("2024-01-01")
    assert not cast.is_iso_datetime("2024-13-01T10:30:00")
    assert not cast.is_iso_datetime("tomorrow")


@pytest.mark.parametrize(
    "value,expected",
    [
        ("alice@company.org", True),
        ("a.b+c@sub.domain.io", True),
        ("invalid-email", False),
        ("two@@signs.com", False),
        ("spaces in@mail.com", False),
        ("user@example.invalid", False),
        ("x@test.test", False),
    ],
)
def test_is_email(value, expected):
    """Test the email format."""
    assert formats.is_email(value) is expected


def test_is_url():
    """Test that URLs need a scheme and a host."""
    assert formats.is_url("https://example.com")
    assert formats.is_url("ftp://files.example.com/a.txt")
    assert not formats.is_url("example.com")
    assert not formats.is_url("https://")
    assert not formats.is_url("mailto:user@example.com")
    assert not formats.is_url("http://exa mple.com")


def test_is_uuid_and_cuid():
    """Test identifier formats."""
    assert formats.is_uuid("123E4567-E89B-12D3-A456-426614174000")
    assert not formats.is_uuid("123e4567e89b12d3a456426614174000")
    assert formats.is_cuid("cjld2cjxh0000qzrmn831i7rn")
    assert not formats.is_cuid("cshort")


def test_is_ip_versions():
    """Test IP addresses per version."""
    assert formats.is_ip("10.0.0.1")
    assert formats.is_ip("fe80::1")
    assert formats.is_ip("10.0.0.1", "v4")
    assert not formats.is_ip("10.0.0.1", "v6")
    assert not formats.is_ip("fe80::1", "v4")
    assert not formats.is_ip("10.0.0.256")


def test_is_numeric():
    """Test digit-only strings."""
    assert formats.is_numeric("0123")
    assert not formats.is_numeric("12.5")
    assert not formats.is_numeric("")


def test_matches_searches():
    """Test that patterns are searched, not anchored."""
    assert formats.matches(re.compile("b"), "abc")
    assert not formats.matches(re.compile("^b"), "abc")
