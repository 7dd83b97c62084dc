"""Schema conversion to pydantic, and evaluation of the converted schema.

The converted schema has two layers. A record model created with
`pydantic.create_model` checks presence and type of every field. Each
field's constraints become separate `TypeAdapter` checks so that every
violated rule is reported, not only the first one.

Field-to-field comparisons and custom validators are not encoded here;
they run in a separate pass (see `polyval.rules`).
"""

import datetime as _datetime
import ipaddress
import logging
import re
import typing

import pydantic as _pydantic
import pydantic_core as _pydantic_core

from . import cast as _cast
from . import formats as _formats
from . import result as _result
from . import schema as _schema

logger = logging.getLogger(__name__)


class ConvertedSchema(typing.NamedTuple):
    """A rule schema expressed as pydantic validators.

    Attributes:
        model: Record model checking presence and type of each field
        checks: Field name -> ordered (rule code, adapter) constraint checks
    """

    model: type[_pydantic.BaseModel]
    checks: dict[str, list[tuple[str, _pydantic.TypeAdapter[typing.Any]]]]


_BASE_TYPES: dict[_schema.FieldType, typing.Any] = {
    _schema.FieldType.STRING: _pydantic.StrictStr,
    _schema.FieldType.NUMBER: _pydantic.StrictFloat,
    _schema.FieldType.BOOLEAN: _pydantic.StrictBool,
    _schema.FieldType.DATE: _pydantic.InstanceOf[_datetime.date],
}


def _require_value(value: typing.Any) -> typing.Any:
    if value is None or (isinstance(value, str) and value == ""):
        raise _pydantic_core.PydanticCustomError("missing", "Field required")
    return value


def _field_annotation(rule: _schema.FieldRule) -> typing.Any:
    base = _BASE_TYPES[rule.type]
    if rule.required:
        return typing.Annotated[base, _pydantic.BeforeValidator(_require_value)]
    return typing.Optional[base]


def _format_check(
    error_type: str,
    message: str,
    predicate: typing.Callable[[str], bool],
    context: dict[str, typing.Any] | None = None,
) -> _pydantic.TypeAdapter[typing.Any]:
    """Wrap a format predicate as a pydantic check raising a custom error."""

    def check(value: str) -> str:
        if not predicate(value):
            raise _pydantic_core.PydanticCustomError(error_type, message, context)
        return value

    return _pydantic.TypeAdapter(
        typing.Annotated[str, _pydantic.AfterValidator(check)]
    )


def _pattern_check(source: str) -> _pydantic.TypeAdapter[typing.Any]:
    try:
        pattern = re.compile(source)
    except re.error as e:
        logger.warning("Invalid regex %r: %s", source, e)
        return _format_check(
            _result.INVALID_PATTERN,
            _result.INVALID_PATTERN_MESSAGE,
            lambda value: False,
        )
    return _format_check(
        "string_pattern_mismatch",
        "String should match pattern '{pattern}'",
        lambda value: _formats.matches(pattern, value),
        {"pattern": source},
    )


def _ip_type(version: typing.Any) -> typing.Any:
    if version == "v4":
        return ipaddress.IPv4Address
    if version == "v6":
        return ipaddress.IPv6Address
    return _pydantic.IPvAnyAddress


def _string_check(
    rule: _schema.FieldRule, code: str
) -> _pydantic.TypeAdapter[typing.Any]:
    if code == _result.MIN:
        return _pydantic.TypeAdapter(
            typing.Annotated[str, _pydantic.StringConstraints(min_length=rule.min)]
        )
    if code == _result.MAX:
        return _pydantic.TypeAdapter(
            typing.Annotated[str, _pydantic.StringConstraints(max_length=rule.max)]
        )
    if code == _result.LENGTH:
        return _pydantic.TypeAdapter(
            typing.Annotated[
                str,
                _pydantic.StringConstraints(
                    min_length=rule.length, max_length=rule.length
                ),
            ]
        )
    if code == _result.EMAIL:
        return _format_check(
            "string_email", "Invalid email address", _formats.is_email
        )
    if code == _result.URL:
        return _format_check("string_url", "Invalid URL", _formats.is_url)
    if code == _result.IP:
        return _pydantic.TypeAdapter(_ip_type(rule.ip))
    if code == _result.UUID:
        return _format_check("string_uuid", "Invalid UUID", _formats.is_uuid)
    if code == _result.CUID:
        return _format_check("string_cuid", "Invalid CUID", _formats.is_cuid)
    if code == _result.DATETIME:
        return _format_check(
            "string_datetime", "Invalid ISO 8601 datetime", _formats.is_datetime
        )
    if code == _result.REGEX:
        return _pattern_check(typing.cast(str, rule.regex))
    if code == _result.STARTS_WITH:
        prefix = typing.cast(str, rule.starts_with)
        return _format_check(
            "string_starts_with",
            "String should start with '{prefix}'",
            lambda value: value.startswith(prefix),
            {"prefix": prefix},
        )
    if code == _result.ENDS_WITH:
        suffix = typing.cast(str, rule.ends_with)
        return _format_check(
            "string_ends_with",
            "String should end with '{suffix}'",
            lambda value: value.endswith(suffix),
            {"suffix": suffix},
        )
    return _format_check(
        "string_numeric", "String should contain only digits", _formats.is_numeric
    )


def _bound_checks(
    rule: _schema.FieldRule, value_type: typing.Any, *extra: typing.Any
) -> list[tuple[str, _pydantic.TypeAdapter[typing.Any]]]:
    checks = []
    if rule.min is not None:
        checks.append(
            (
                _result.MIN,
                _pydantic.TypeAdapter(
                    typing.Annotated[
                        (value_type, _pydantic.Field(ge=rule.min), *extra)
                    ]
                ),
            )
        )
    if rule.max is not None:
        checks.append(
            (
                _result.MAX,
                _pydantic.TypeAdapter(
                    typing.Annotated[
                        (value_type, _pydantic.Field(le=rule.max), *extra)
                    ]
                ),
            )
        )
    return checks


def _field_checks(
    rule: _schema.FieldRule,
) -> list[tuple[str, _pydantic.TypeAdapter[typing.Any]]]:
    if rule.type is _schema.FieldType.STRING:
        return [(code, _string_check(rule, code)) for code in rule.string_rules()]
    if rule.type is _schema.FieldType.NUMBER:
        return _bound_checks(rule, float)
    if rule.type is _schema.FieldType.DATE:
        return _bound_checks(
            rule, _datetime.datetime, _pydantic.BeforeValidator(_cast.as_datetime)
        )
    if isinstance(rule.equals, bool):
        # boolean literal refinement, e.g. accepted terms must be True
        return [
            (
                _result.EQUALS,
                _pydantic.TypeAdapter(typing.Literal[rule.equals]),  # type: ignore[valid-type]
            )
        ]
    return []


def convert_schema(schema: _schema.Schema) -> ConvertedSchema:
    """Convert a rule schema to pydantic validators.

    Args:
        schema: Parsed rule schema

    Returns:
        ConvertedSchema with the record model and per-field checks
    """
    definitions: dict[str, typing.Any] = {}
    checks: dict[str, list[tuple[str, _pydantic.TypeAdapter[typing.Any]]]] = {}
    for index, (name, rule) in enumerate(schema.items()):
        # Internal attribute names, aliased to the record keys, so any key
        # can be a field.
        default = ... if rule.required else None
        definitions[f"field_{index}"] = (
            _field_annotation(rule),
            _pydantic.Field(default, alias=name),
        )
        checks[name] = _field_checks(rule)
    model = _pydantic.create_model("ConvertedRecord", **definitions)
    return ConvertedSchema(model, checks)


def _location_field(error: typing.Mapping[str, typing.Any]) -> str:
    loc = error.get("loc") or ()
    return str(loc[-1]) if loc else ""


def run_schema(
    converted: ConvertedSchema, record: typing.Mapping[str, typing.Any]
) -> list[dict[str, typing.Any]]:
    """Validate a record against a converted schema.

    Fields failing the record model (missing or wrong type) are not
    constraint-checked; neither are absent optional fields.

    Args:
        converted: The converted schema
        record: Record to validate

    Returns:
        Pydantic error dictionaries (loc, type, msg, input, ctx) in schema
        field order. Each constraint error's ctx carries 'validation', the
        rule code of the check that raised it. Empty if the record is valid.
    """
    by_field: dict[str, list[dict[str, typing.Any]]] = {
        name: [] for name in converted.checks
    }
    try:
        converted.model.model_validate(dict(record))
    except _pydantic.ValidationError as e:
        for error in e.errors():
            by_field.setdefault(_location_field(error), []).append(dict(error))

    for name, checks in converted.checks.items():
        value = record.get(name)
        if by_field[name] or value is None:
            continue
        for code, adapter in checks:
            try:
                adapter.validate_python(value)
            except _pydantic.ValidationError as e:
                for error in e.errors():
                    context = dict(error.get("ctx") or {})
                    context["validation"] = code
                    by_field[name].append(
                        {**error, "loc": (name, *error["loc"]), "ctx": context}
                    )

    return [error for errors in by_field.values() for error in errors]
