import logging
import typing as _typing

import pydantic as _pydantic

from . import direct as _direct
from . import messages as _messages
from . import options as _options
from . import overrides as _overrides
from . import record as _record
from . import resolve as _resolve
from . import result as _result
from . import schema as _schema
from . import translate as _translate

logger = logging.getLogger(__name__)

UNEXPECTED_ERROR_MESSAGE = "An unexpected validation error occurred"

SchemaInput = _typing.Mapping[str, _schema.FieldRule | _typing.Mapping[str, _typing.Any]]
OverridesInput = _overrides.Overrides | _typing.Mapping[str, _typing.Any] | None
DataInput = _record.Record | _pydantic.BaseModel


def _as_record(data: DataInput) -> dict[str, _typing.Any]:
    """Convert data to a plain dict record.

    Args:
        data: Dictionary, Pydantic model, or any mapping

    Returns:
        Dictionary copy of the data
    """
    if isinstance(data, dict):
        return data.copy()
    if isinstance(data, _pydantic.BaseModel):
        return data.model_dump()
    return dict(data)


def collect_issues(
    schema: SchemaInput,
    data: DataInput,
    *,
    strategy: _options.Strategy | str = _options.Strategy.DIRECT,
) -> list[_result.Issue]:
    """Check a record and return its unresolved issues.

    Args:
        schema: Field name -> FieldRule (or rule dictionary)
        data: Record to check
        strategy: How to check the record

    Returns:
        Issues in schema field order, empty if the record is valid

    Raises:
        pydantic.ValidationError: If the schema is invalid
    """
    rules = _schema.parse_schema(schema)
    record = _as_record(data)
    if _options.Strategy(strategy) is _options.Strategy.PYDANTIC:
        return _translate.collect_issues(rules, record)
    return _direct.check_record(rules, record)


def validate(
    schema: SchemaInput,
    data: DataInput,
    *,
    language: str = _messages.DEFAULT_LANGUAGE,
    overrides: OverridesInput = None,
    strategy: _options.Strategy | str = _options.Strategy.DIRECT,
) -> list[str]:
    """Validate a record against a rule schema.

    Never raises: any fault while checking, including an invalid schema or
    override tree, is logged and reported as a single generic message.

    Args:
        schema: Field name -> FieldRule (or rule dictionary)
        data: Dictionary, Pydantic model, or mapping to validate
        language: Language code for default messages ('en', 'tr'); unknown
            codes fall back to English
        overrides: Custom messages, an Overrides instance or its dictionary form
        strategy: Strategy.DIRECT or Strategy.PYDANTIC

    Returns:
        'Field: message' strings in schema field order, empty if valid

    Examples:
        >>> validate({"age": {"type": "number", "min": 18}}, {"age": 16})
        ['Age: Must be at least 18']
    """
    try:
        record = _as_record(data)
        tree = _overrides.parse_overrides(overrides)
        issues = collect_issues(schema, record, strategy=strategy)
        messages = _resolve.resolve_messages(
            issues, language=language, overrides=tree, record=record
        )
    except Exception:
        logger.exception("Unexpected error during %s validation", strategy)
        return [UNEXPECTED_ERROR_MESSAGE]
    logger.debug(
        "Validated %d field(s) with %s strategy: %d issue(s)",
        len(schema),
        _options.Strategy(strategy).value,
        len(messages),
    )
    return messages


def validate_direct(
    schema: SchemaInput,
    data: DataInput,
    *,
    language: str = _messages.DEFAULT_LANGUAGE,
    overrides: OverridesInput = None,
) -> list[str]:
    """Validate with the direct strategy. See `validate`."""
    return validate(
        schema,
        data,
        language=language,
        overrides=overrides,
        strategy=_options.Strategy.DIRECT,
    )


def validate_pydantic(
    schema: SchemaInput,
    data: DataInput,
    *,
    language: str = _messages.DEFAULT_LANGUAGE,
    overrides: OverridesInput = None,
) -> list[str]:
    """Validate with the pydantic strategy. See `validate`."""
    return validate(
        schema,
        data,
        language=language,
        overrides=overrides,
        strategy=_options.Strategy.PYDANTIC,
    )
