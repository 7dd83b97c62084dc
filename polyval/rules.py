"""Validation rules that look beyond a single value: field comparisons and custom predicates."""

import typing

import pydantic as _pydantic

from . import record as _record
from . import result as _result


class CustomValidator(_pydantic.BaseModel):
    """A user predicate attached to a field.

    Attributes:
        validator: Function(value, record) returning an error message, or None
            if the value is valid
        message_key: Optional key referencing this validator in the override
            tree (fields[field][key] or custom[key])
    """

    model_config = _pydantic.ConfigDict(populate_by_name=True, frozen=True)

    validator: typing.Callable[[_record.Value, _record.Record], str | None]
    message_key: str | None = _pydantic.Field(default=None, alias="messageKey")

    def check(self, value: _record.Value, record: _record.Record) -> str | None:
        """Run the predicate.

        Exceptions raised by the predicate propagate to the caller.
        """
        return self.validator(value, record)


def relation_issues(
    name: str,
    rule: typing.Any,
    value: typing.Any,
    record: typing.Mapping[str, typing.Any],
) -> list[_result.Issue]:
    """Compare a field against other fields of the record.

    Args:
        name: Field name
        rule: The field's FieldRule
        value: The field's value (present and correctly typed)
        record: The whole record

    Returns:
        One issue per failed comparison. A boolean `equals` is a literal
        check and is not handled here.
    """
    issues: list[_result.Issue] = []
    if isinstance(rule.equals, str) and record.get(rule.equals) != value:
        issues.append(
            _result.Issue(name, _result.EQUALS, (rule.equals,), value=value)
        )
    if rule.not_equals is not None and record.get(rule.not_equals) == value:
        issues.append(
            _result.Issue(name, _result.NOT_EQUALS, (rule.not_equals,), value=value)
        )
    return issues


def custom_issues(
    name: str,
    rule: typing.Any,
    value: typing.Any,
    record: typing.Mapping[str, typing.Any],
) -> list[_result.Issue]:
    """Run a field's custom validators in declaration order."""
    issues: list[_result.Issue] = []
    for custom in rule.custom_validators:
        message = custom.check(value, record)
        if message is not None:
            issues.append(
                _result.Issue(
                    name,
                    _result.CUSTOM,
                    value=value,
                    message=str(message),
                    message_key=custom.message_key,
                )
            )
    return issues
