"""String format predicates."""

import ipaddress
import re
import typing
from urllib.parse import urlsplit

import email_validator

from . import cast as _cast

WHITESPACE_PATTERN = re.compile(r"\s")
UUID_PATTERN = re.compile(
    r"^[0-9a-fA-F]{8}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{12}$"
)
CUID_PATTERN = re.compile(r"^c[^\s-]{8,}$", re.IGNORECASE)
NUMERIC_PATTERN = re.compile(r"^[0-9]+$")


def is_email(value: str) -> bool:
    """Check that value is an email address (syntax only, no DNS lookup).

    Reserved and special-use domains such as '.test' or '.invalid' are rejected.
    """
    try:
        email_validator.validate_email(value, check_deliverability=False)
    except email_validator.EmailNotValidError:
        return False
    return True


def is_url(value: str) -> bool:
    """Check that value has a scheme and a host, and no whitespace."""
    if WHITESPACE_PATTERN.search(value):
        return False
    try:
        parts = urlsplit(value)
    except ValueError:
        return False
    return bool(parts.scheme) and bool(parts.netloc)


def is_uuid(value: str) -> bool:
    return UUID_PATTERN.match(value) is not None


def is_cuid(value: str) -> bool:
    return CUID_PATTERN.match(value) is not None


def is_datetime(value: str) -> bool:
    return _cast.is_iso_datetime(value)


def is_ip(value: str, version: typing.Any = True) -> bool:
    """Check that value is an IP address.

    Args:
        value: Text to check
        version: 'v4', 'v6', or True for either
    """
    factory: typing.Callable[[str], typing.Any]
    if version == "v4":
        factory = ipaddress.IPv4Address
    elif version == "v6":
        factory = ipaddress.IPv6Address
    else:
        factory = ipaddress.ip_address
    try:
        factory(value)
    except ValueError:
        return False
    return True


def is_numeric(value: str) -> bool:
    return NUMERIC_PATTERN.match(value) is not None


def matches(pattern: re.Pattern[str], value: str) -> bool:
    """Search semantics: the pattern may match anywhere unless anchored."""
    return pattern.search(value) is not None
