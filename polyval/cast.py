import datetime as _datetime
import typing

import dateutil.parser  # type: ignore[import-untyped]


def as_datetime(value: typing.Any) -> typing.Any:
    """Cast a date bound to a naive UTC datetime.

    Args:
        value: datetime, date, ISO-8601 string, or POSIX timestamp in seconds

    Returns:
        The bound as a naive datetime in UTC, or value unchanged if it is
        none of the accepted kinds

    Raises:
        dateutil.parser.ParserError: If a string bound is not ISO-8601
        ValueError: If a string bound is not ISO-8601
    """
    if isinstance(value, _datetime.datetime):
        return to_naive_utc(value)
    if isinstance(value, _datetime.date):
        return _datetime.datetime.combine(value, _datetime.time())
    if isinstance(value, str):
        return to_naive_utc(dateutil.parser.isoparse(value))
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        moment = _datetime.datetime.fromtimestamp(value, tz=_datetime.timezone.utc)
        return moment.replace(tzinfo=None)
    return value


def to_naive_utc(value: typing.Any) -> typing.Any:
    """Drop timezone information from an aware datetime after moving it to UTC.

    Naive datetimes are taken to already be in UTC. Anything that is not a
    datetime is returned unchanged.
    """
    if isinstance(value, _datetime.datetime) and value.tzinfo is not None:
        return value.astimezone(_datetime.timezone.utc).replace(tzinfo=None)
    return value


def is_iso_datetime(value: str) -> bool:
    """Check that a string is an ISO-8601 date and time."""
    if "T" not in value.upper():
        return False
    try:
        dateutil.parser.isoparse(value)
    except (ValueError, OverflowError):
        return False
    return True
