"""Message resolution shared by both validation strategies.

For each issue the first hit wins:

1. fields[field][message_key] for custom validators
2. fields[field][rule]
3. custom[message_key] for custom validators
4. the rule kind's override (string/number/date/boolean groups, equals, not_equals)
5. the general override (required, invalid_type)
6. the catalog default for the language
"""

import typing

from . import messages as _messages
from . import overrides as _overrides
from . import providers as _providers
from . import result as _result


def format_message(field: str, message: str) -> str:
    """Prefix a message with the capitalized field name.

    Messages that already start with the capitalized field name are returned
    unchanged.
    """
    if not field:
        return message
    name = field[0].upper() + field[1:]
    if message.startswith(name):
        return message
    return f"{name}: {message}"


def _group_key(issue: _result.Issue) -> str:
    # A boolean literal's group messages are keyed by the expected value.
    if issue.group == "boolean" and issue.code == _result.EQUALS:
        return "true" if issue.params[0] else "false"
    return issue.code


def _custom_text(
    issue: _result.Issue,
    record: typing.Mapping[str, typing.Any],
    overrides: _overrides.Overrides,
) -> str:
    if issue.message_key is not None:
        provider = overrides.field_message(issue.field, issue.message_key)
        if provider is None:
            provider = overrides.custom.get(issue.message_key)
        if provider is not None:
            return provider.render(issue.value, record)
    return issue.message or ""


def resolve_text(
    issue: _result.Issue,
    *,
    language: str,
    overrides: _overrides.Overrides,
    record: typing.Mapping[str, typing.Any],
) -> str:
    """Pick the message for an issue, without the field prefix.

    Args:
        issue: The failed rule
        language: Language code for catalog defaults
        overrides: Override tree
        record: The record being validated (passed to custom messages)

    Returns:
        The message text
    """
    if issue.code == _result.CUSTOM:
        return _custom_text(issue, record, overrides)
    if issue.code == _result.INVALID_PATTERN:
        return _result.INVALID_PATTERN_MESSAGE

    key = _group_key(issue)
    provider: _providers.MessageProvider | None = overrides.field_message(
        issue.field, issue.code
    )
    if provider is None:
        provider = overrides.global_message(issue.group, key)
    if provider is None:
        provider = _messages.catalog_message(language, issue.group, key)
    if provider is None:
        return issue.message if issue.message is not None else issue.code
    return provider.render(*issue.params)


def resolve_message(
    issue: _result.Issue,
    *,
    language: str,
    overrides: _overrides.Overrides,
    record: typing.Mapping[str, typing.Any],
) -> str:
    """Resolve an issue to its final 'Field: message' string."""
    text = resolve_text(
        issue, language=language, overrides=overrides, record=record
    )
    return format_message(issue.field, text)


def resolve_messages(
    issues: typing.Iterable[_result.Issue],
    *,
    language: str,
    overrides: _overrides.Overrides,
    record: typing.Mapping[str, typing.Any],
) -> list[str]:
    return [
        resolve_message(issue, language=language, overrides=overrides, record=record)
        for issue in issues
    ]
