"""Error translator: turns pydantic errors into issues and messages."""

import typing

import pydantic as _pydantic

from . import convert as _convert
from . import messages as _messages
from . import overrides as _overrides
from . import resolve as _resolve
from . import result as _result
from . import rules as _rules
from . import schema as _schema

_TYPE_ERRORS = frozenset(
    {
        "string_type",
        "float_type",
        "int_type",
        "bool_type",
        "datetime_type",
        "is_instance_of",
    }
)

# Rule codes for pydantic errors raised without a 'validation' tag.
_PLAIN_CODES = {
    "string_too_short": _result.MIN,
    "string_too_long": _result.MAX,
    "greater_than_equal": _result.MIN,
    "greater_than": _result.MIN,
    "less_than_equal": _result.MAX,
    "less_than": _result.MAX,
    "string_pattern_mismatch": _result.REGEX,
    "literal_error": _result.EQUALS,
    "url_parsing": _result.URL,
    "url_scheme": _result.URL,
    "url_syntax_violation": _result.URL,
    "ip_v4_address": _result.IP,
    "ip_v6_address": _result.IP,
    "ip_any_address": _result.IP,
    "string_email": _result.EMAIL,
    "string_url": _result.URL,
    "string_uuid": _result.UUID,
    "string_cuid": _result.CUID,
    "string_datetime": _result.DATETIME,
    "string_starts_with": _result.STARTS_WITH,
    "string_ends_with": _result.ENDS_WITH,
    "string_numeric": _result.NUMERIC,
}

_CONTEXT_PARAMS = ("min_length", "max_length", "ge", "gt", "le", "lt", "prefix", "suffix")

_STRING_ERROR_PREFIXES = ("string_", "url_", "ip_", "value_error")


def _context_params(context: typing.Mapping[str, typing.Any]) -> tuple[typing.Any, ...]:
    for key in _CONTEXT_PARAMS:
        if key in context:
            return (context[key],)
    return ()


def _group(
    code: str, rule: _schema.FieldRule | None, error_type: str
) -> str | None:
    if code in _result.GENERAL_CODES or code == _result.NOT_EQUALS:
        return None
    if code == _result.EQUALS:
        if rule is not None and isinstance(rule.equals, bool):
            return "boolean"
        return None
    if rule is not None:
        return rule.type.value
    return "string" if error_type.startswith(_STRING_ERROR_PREFIXES) else "number"


def issue_from_error(
    error: typing.Mapping[str, typing.Any], schema: _schema.Schema
) -> _result.Issue:
    """Translate one pydantic error into an issue.

    The owning field is the last segment of the error location. Rule
    parameters are taken from the field's rule in the schema, or from the
    error context for fields the schema does not know.

    Args:
        error: Pydantic error dictionary (loc, type, msg, input, ctx)
        schema: The rule schema the error was produced for

    Returns:
        Issue carrying the pydantic message as last-resort text
    """
    loc = error.get("loc") or ()
    field = str(loc[-1]) if loc else ""
    rule = schema.get(field)
    error_type = error["type"]
    context = error.get("ctx") or {}
    message = error.get("msg")

    if error_type == "missing":
        return _result.Issue(field, _result.REQUIRED, message=message)
    if error_type in _TYPE_ERRORS:
        return _result.Issue(
            field, _result.INVALID_TYPE, value=error.get("input"), message=message
        )

    # A malformed pattern is reported as such whatever check raised it.
    if error_type == _result.INVALID_PATTERN:
        return _result.Issue(
            field, _result.INVALID_PATTERN, value=error.get("input"), message=message
        )

    code = context.get("validation") or _PLAIN_CODES.get(error_type)
    if code is None:
        return _result.Issue(
            field, error_type, value=error.get("input"), message=message
        )

    params = rule.params(code) if rule is not None else _context_params(context)
    return _result.Issue(
        field,
        code,
        params,
        _group(code, rule, error_type),
        value=error.get("input"),
        message=message,
    )


def collect_issues(
    schema: _schema.Schema, record: typing.Mapping[str, typing.Any]
) -> list[_result.Issue]:
    """Validate a record through pydantic and collect its issues.

    The schema is converted and evaluated by pydantic; each error becomes an
    issue. Field comparisons and custom validators then run for every field
    that is present and correctly typed. Issues come out in schema field
    order, pydantic's issues before the comparison and custom ones.

    Args:
        schema: Parsed rule schema
        record: Record to validate

    Returns:
        Issues, empty if the record is valid
    """
    converted = _convert.convert_schema(schema)
    by_field: dict[str, list[_result.Issue]] = {name: [] for name in schema}
    for error in _convert.run_schema(converted, record):
        issue = issue_from_error(error, schema)
        by_field.setdefault(issue.field, []).append(issue)

    for name, rule in schema.items():
        value = record.get(name)
        stopped = any(
            issue.code in _result.GENERAL_CODES for issue in by_field[name]
        )
        if stopped or value is None:
            continue
        by_field[name].extend(_rules.relation_issues(name, rule, value, record))
        by_field[name].extend(_rules.custom_issues(name, rule, value, record))

    return [issue for issues in by_field.values() for issue in issues]


def translate_errors(
    errors: _pydantic.ValidationError | typing.Iterable[typing.Mapping[str, typing.Any]],
    schema: typing.Mapping[str, typing.Any],
    *,
    language: str = _messages.DEFAULT_LANGUAGE,
    overrides: _overrides.Overrides | typing.Mapping[str, typing.Any] | None = None,
    record: typing.Mapping[str, typing.Any] | None = None,
) -> list[str]:
    """Translate pydantic errors into localized messages.

    Args:
        errors: A pydantic ValidationError or a list of its error dictionaries
        schema: Rule schema (FieldRules or rule dictionaries) the errors belong to
        language: Language code for default messages
        overrides: Override tree
        record: The validated record, passed to custom message functions

    Returns:
        One 'Field: message' string per error, in error order

    Raises:
        pydantic.ValidationError: If schema or overrides are invalid
    """
    if isinstance(errors, _pydantic.ValidationError):
        errors = errors.errors()
    rules = _schema.parse_schema(schema)
    tree = _overrides.parse_overrides(overrides)
    issues = [issue_from_error(error, rules) for error in errors]
    return _resolve.resolve_messages(
        issues, language=language, overrides=tree, record=record or {}
    )
