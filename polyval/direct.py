"""Direct validator: walks the schema and checks each field inline."""

import logging
import re
import typing

from . import cast as _cast
from . import formats as _formats
from . import record as _record
from . import result as _result
from . import rules as _rules
from . import schema as _schema

logger = logging.getLogger(__name__)

_STRING_FORMATS: dict[str, typing.Callable[[str], bool]] = {
    _result.EMAIL: _formats.is_email,
    _result.URL: _formats.is_url,
    _result.UUID: _formats.is_uuid,
    _result.CUID: _formats.is_cuid,
    _result.DATETIME: _formats.is_datetime,
    _result.NUMERIC: _formats.is_numeric,
}


def is_blank(value: typing.Any) -> bool:
    """True for values that fail a required rule: None or ''."""
    return value is None or (isinstance(value, str) and value == "")


def _string_issues(
    name: str, rule: _schema.FieldRule, value: str
) -> list[_result.Issue]:
    issues: list[_result.Issue] = []

    def fail(code: str) -> None:
        issues.append(
            _result.Issue(name, code, rule.params(code), "string", value=value)
        )

    for code in rule.string_rules():
        if code == _result.MIN:
            if len(value) < typing.cast(int, rule.min):
                fail(code)
        elif code == _result.MAX:
            if len(value) > typing.cast(int, rule.max):
                fail(code)
        elif code == _result.LENGTH:
            if len(value) != rule.length:
                fail(code)
        elif code == _result.IP:
            if not _formats.is_ip(value, rule.ip):
                fail(code)
        elif code == _result.REGEX:
            try:
                pattern = typing.cast(re.Pattern[str], rule.compile_pattern())
            except re.error as e:
                logger.warning("Invalid regex for field %r: %s", name, e)
                issues.append(_result.Issue(name, _result.INVALID_PATTERN, value=value))
                continue
            if not _formats.matches(pattern, value):
                fail(code)
        elif code == _result.STARTS_WITH:
            if not value.startswith(typing.cast(str, rule.starts_with)):
                fail(code)
        elif code == _result.ENDS_WITH:
            if not value.endswith(typing.cast(str, rule.ends_with)):
                fail(code)
        elif not _STRING_FORMATS[code](value):
            fail(code)
    return issues


def _bound_issues(
    name: str, rule: _schema.FieldRule, value: typing.Any, group: str
) -> list[_result.Issue]:
    issues: list[_result.Issue] = []
    if rule.min is not None and value < rule.min:
        issues.append(
            _result.Issue(name, _result.MIN, (rule.min,), group, value=value)
        )
    if rule.max is not None and value > rule.max:
        issues.append(
            _result.Issue(name, _result.MAX, (rule.max,), group, value=value)
        )
    return issues


def _literal_issues(
    name: str, rule: _schema.FieldRule, value: bool
) -> list[_result.Issue]:
    if isinstance(rule.equals, bool) and value is not rule.equals:
        return [
            _result.Issue(name, _result.EQUALS, (rule.equals,), "boolean", value=value)
        ]
    return []


def check_field(
    name: str, rule: _schema.FieldRule, record: _record.Record
) -> list[_result.Issue]:
    """Check one field of a record.

    Presence is checked first, then the value's type; either failure ends
    the field's checks. Type rules, field comparisons and custom validators
    follow, each failed rule adding its own issue.

    Args:
        name: Field name
        rule: The field's rules
        record: The whole record

    Returns:
        Issues for this field, in rule evaluation order
    """
    value = record.get(name)
    if rule.required and is_blank(value):
        return [_result.Issue(name, _result.REQUIRED, value=value)]
    if value is None:
        return []
    if not rule.type.matches(value):
        return [_result.Issue(name, _result.INVALID_TYPE, value=value)]

    issues: list[_result.Issue]
    if rule.type is _schema.FieldType.STRING:
        issues = _string_issues(name, rule, value)
    elif rule.type is _schema.FieldType.NUMBER:
        issues = _bound_issues(name, rule, value, "number")
    elif rule.type is _schema.FieldType.DATE:
        issues = _bound_issues(name, rule, _cast.as_datetime(value), "date")
    else:
        issues = _literal_issues(name, rule, value)

    issues.extend(_rules.relation_issues(name, rule, value, record))
    issues.extend(_rules.custom_issues(name, rule, value, record))
    return issues


def check_record(
    schema: _schema.Schema, record: _record.Record
) -> list[_result.Issue]:
    """Check every field of a record, in schema order."""
    issues: list[_result.Issue] = []
    for name, rule in schema.items():
        issues.extend(check_field(name, rule, record))
    return issues
