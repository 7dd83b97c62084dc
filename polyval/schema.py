"""Rule schema: declarative per-field validation configuration."""

import datetime as _datetime
import re
import typing
from enum import Enum

import pydantic as _pydantic

from . import cast as _cast
from . import result as _result
from . import rules as _rules


class FieldType(str, Enum):
    """Declared type of a field. Decides which rules apply to it."""

    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"
    DATE = "date"

    def matches(self, value: typing.Any) -> bool:
        """Check the runtime kind of a value against this type."""
        if self is FieldType.STRING:
            return isinstance(value, str)
        if self is FieldType.NUMBER:
            return isinstance(value, (int, float)) and not isinstance(value, bool)
        if self is FieldType.BOOLEAN:
            return isinstance(value, bool)
        return isinstance(value, _datetime.date)


# Evaluation order of string rules, shared by both strategies.
STRING_RULES = (
    _result.MIN,
    _result.MAX,
    _result.LENGTH,
    _result.EMAIL,
    _result.URL,
    _result.UUID,
    _result.CUID,
    _result.DATETIME,
    _result.IP,
    _result.REGEX,
    _result.STARTS_WITH,
    _result.ENDS_WITH,
    _result.NUMERIC,
)

Bound = int | float | _datetime.datetime


class FieldRule(_pydantic.BaseModel):
    """Validation rules for one field.

    Attributes:
        type: Declared field type. Date fields take date or datetime values;
            a date counts as its midnight, aware datetimes are compared in UTC
        required: Whether None, a missing key or '' is an error
        min: Minimum string length, number value or date
        max: Maximum string length, number value or date
        length: Exact string length
        email: String must be an email address
        url: String must be a URL
        uuid: String must be a UUID
        cuid: String must be a CUID
        datetime: String must be an ISO-8601 date and time
        ip: String must be an IP address (True for any version, 'v4' or 'v6')
        regex: Pattern source the string must match (searched, not anchored)
        starts_with: Prefix the string must start with
        ends_with: Suffix the string must end with
        numeric: String must contain only digits
        equals: Name of a field this one must equal, or a literal boolean
        not_equals: Name of a field this one must differ from
        custom_validators: Predicates run in order after all other rules
    """

    model_config = _pydantic.ConfigDict(populate_by_name=True)

    type: FieldType
    required: bool = False
    min: Bound | None = None
    max: Bound | None = None
    length: int | None = None
    email: bool = False
    url: bool = False
    uuid: bool = False
    cuid: bool = False
    datetime: bool = False
    ip: bool | typing.Literal["v4", "v6"] = False
    regex: str | None = None
    starts_with: str | None = _pydantic.Field(default=None, alias="startsWith")
    ends_with: str | None = _pydantic.Field(default=None, alias="endsWith")
    numeric: bool = False
    equals: bool | str | None = None
    not_equals: str | None = _pydantic.Field(default=None, alias="notEquals")
    custom_validators: list[_rules.CustomValidator] = _pydantic.Field(
        default_factory=list, alias="customValidators"
    )

    @_pydantic.field_validator("min", "max", mode="before")
    @classmethod
    def _parse_date_bound(cls, value: typing.Any) -> typing.Any:
        if isinstance(value, (str, _datetime.date)):
            return _cast.as_datetime(value)
        return value

    @_pydantic.field_validator("custom_validators", mode="before")
    @classmethod
    def _wrap_callables(cls, value: typing.Any) -> typing.Any:
        if isinstance(value, (list, tuple)):
            return [{"validator": v} if callable(v) else v for v in value]
        return value

    @_pydantic.model_validator(mode="after")
    def _normalize_dates(self) -> "FieldRule":
        if self.type is FieldType.DATE:
            self.min = _cast.as_datetime(self.min)
            self.max = _cast.as_datetime(self.max)
        return self

    def compile_pattern(self) -> re.Pattern[str] | None:
        """Compile the regex rule.

        Raises:
            re.error: If the pattern source is malformed
        """
        if self.regex is None:
            return None
        return re.compile(self.regex)

    def string_rules(self) -> list[str]:
        """String rule codes this field sets, in evaluation order."""
        active = {
            _result.MIN: self.min is not None,
            _result.MAX: self.max is not None,
            _result.LENGTH: self.length is not None,
            _result.EMAIL: self.email,
            _result.URL: self.url,
            _result.UUID: self.uuid,
            _result.CUID: self.cuid,
            _result.DATETIME: self.datetime,
            _result.IP: self.ip is not False,
            _result.REGEX: self.regex is not None,
            _result.STARTS_WITH: self.starts_with is not None,
            _result.ENDS_WITH: self.ends_with is not None,
            _result.NUMERIC: self.numeric,
        }
        return [code for code in STRING_RULES if active[code]]

    def params(self, code: str) -> tuple[typing.Any, ...]:
        """Parameters the message for a rule code is rendered with."""
        if code in (_result.MIN, _result.MAX, _result.LENGTH):
            return (getattr(self, code),)
        if code == _result.STARTS_WITH:
            return (self.starts_with,)
        if code == _result.ENDS_WITH:
            return (self.ends_with,)
        if code == _result.EQUALS:
            return (self.equals,)
        if code == _result.NOT_EQUALS:
            return (self.not_equals,)
        return ()


Schema = dict[str, FieldRule]

_SCHEMA_ADAPTER = _pydantic.TypeAdapter(Schema)


def parse_schema(
    schema: typing.Mapping[str, FieldRule | typing.Mapping[str, typing.Any]],
) -> Schema:
    """Validate a schema definition.

    Args:
        schema: Mapping of field name to FieldRule or rule dictionary

    Returns:
        Mapping of field name to FieldRule, in the given field order

    Raises:
        pydantic.ValidationError: If a rule definition is invalid
    """
    return _SCHEMA_ADAPTER.validate_python(schema)
