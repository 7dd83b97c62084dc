"""Override tree: caller-supplied messages layered by specificity."""

import typing

import pydantic as _pydantic

from . import providers as _providers
from . import result as _result

# Parameters each rule's message is rendered with.
RULE_ARITY: dict[str, dict[str, int]] = {
    "string": {
        _result.MIN: 1,
        _result.MAX: 1,
        _result.LENGTH: 1,
        _result.EMAIL: 0,
        _result.URL: 0,
        _result.UUID: 0,
        _result.CUID: 0,
        _result.DATETIME: 0,
        _result.IP: 0,
        _result.REGEX: 0,
        _result.STARTS_WITH: 1,
        _result.ENDS_WITH: 1,
        _result.NUMERIC: 0,
    },
    "number": {_result.MIN: 1, _result.MAX: 1},
    "date": {_result.MIN: 1, _result.MAX: 1},
    "boolean": {"true": 0, "false": 0},
}

GENERAL_ARITY: dict[str, int] = {
    _result.REQUIRED: 0,
    _result.INVALID_TYPE: 0,
    _result.EQUALS: 1,
    _result.NOT_EQUALS: 1,
}

# Keys of fields[field] that name a rule; any other key is a custom message key.
FIELD_ARITY: dict[str, int] = {
    **RULE_ARITY["string"],
    **GENERAL_ARITY,
    _result.INVALID_PATTERN: 0,
}

# Custom messages receive (value, record).
CUSTOM_ARITY = 2

_KEY_ALIASES = {
    "startsWith": _result.STARTS_WITH,
    "endsWith": _result.ENDS_WITH,
    "notEquals": _result.NOT_EQUALS,
    "invalidType": _result.INVALID_TYPE,
}

Provider = _pydantic.InstanceOf[_providers.MessageProvider]


def _normalize_key(key: str) -> str:
    return _KEY_ALIASES.get(key, key)


class Overrides(_pydantic.BaseModel):
    """Custom messages, checked before the catalog defaults.

    Leaves may be strings or functions; functions are checked against the
    number of parameters their rule supplies when the tree is built.

    Attributes:
        required: Message for missing required fields
        invalid_type: Message for values of the wrong type
        equals: Message for failed field equality, called with the target field
        not_equals: Message for failed field inequality, called with the target field
        string: Messages for string rules, keyed by rule
        number: Messages for number rules ('min', 'max')
        date: Messages for date rules ('min', 'max')
        boolean: Messages for boolean literals ('true', 'false')
        fields: Per-field messages, keyed by field then by rule or custom message key
        custom: Custom validator messages, keyed by message key
    """

    model_config = _pydantic.ConfigDict(populate_by_name=True, frozen=True)

    required: Provider | None = None
    invalid_type: Provider | None = _pydantic.Field(default=None, alias="invalidType")
    equals: Provider | None = None
    not_equals: Provider | None = _pydantic.Field(default=None, alias="notEquals")
    string: dict[str, Provider] = _pydantic.Field(default_factory=dict)
    number: dict[str, Provider] = _pydantic.Field(default_factory=dict)
    date: dict[str, Provider] = _pydantic.Field(default_factory=dict)
    boolean: dict[str, Provider] = _pydantic.Field(default_factory=dict)
    fields: dict[str, dict[str, Provider]] = _pydantic.Field(default_factory=dict)
    custom: dict[str, Provider] = _pydantic.Field(default_factory=dict)

    @_pydantic.field_validator(
        "required", "invalid_type", "equals", "not_equals", mode="before"
    )
    @classmethod
    def _general_message(
        cls, value: typing.Any, info: _pydantic.ValidationInfo
    ) -> typing.Any:
        if value is None:
            return None
        return _providers.as_provider(value, GENERAL_ARITY[info.field_name])

    @_pydantic.field_validator("string", "number", "date", "boolean", mode="before")
    @classmethod
    def _rule_messages(
        cls, value: typing.Any, info: _pydantic.ValidationInfo
    ) -> typing.Any:
        if not isinstance(value, typing.Mapping):
            return value
        arities = RULE_ARITY[info.field_name]
        messages = {}
        for key, leaf in value.items():
            rule = _normalize_key(key)
            if rule not in arities:
                raise ValueError(f"unknown {info.field_name} rule {key!r}")
            if leaf is not None:
                messages[rule] = _providers.as_provider(leaf, arities[rule])
        return messages

    @_pydantic.field_validator("fields", mode="before")
    @classmethod
    def _field_messages(cls, value: typing.Any) -> typing.Any:
        if not isinstance(value, typing.Mapping):
            return value
        fields = {}
        for field_name, leaves in value.items():
            if not isinstance(leaves, typing.Mapping):
                raise ValueError(f"messages for field {field_name!r} must be a mapping")
            messages = {}
            for key, leaf in leaves.items():
                rule = _normalize_key(key)
                if leaf is not None:
                    arity = FIELD_ARITY.get(rule, CUSTOM_ARITY)
                    messages[rule] = _providers.as_provider(leaf, arity)
            fields[field_name] = messages
        return fields

    @_pydantic.field_validator("custom", mode="before")
    @classmethod
    def _custom_messages(cls, value: typing.Any) -> typing.Any:
        if not isinstance(value, typing.Mapping):
            return value
        return {
            key: _providers.as_provider(leaf, CUSTOM_ARITY)
            for key, leaf in value.items()
            if leaf is not None
        }

    def field_message(
        self, field: str, key: str
    ) -> _providers.MessageProvider | None:
        """Message set for one rule or message key of one field."""
        return self.fields.get(field, {}).get(key)

    def global_message(
        self, group: str | None, key: str
    ) -> _providers.MessageProvider | None:
        """Message set for a rule kind (group given) or a general code (group None)."""
        if group is None:
            if key not in GENERAL_ARITY:
                return None
            return getattr(self, key)
        messages: dict[str, _providers.MessageProvider] = getattr(self, group, {})
        return messages.get(key)


def parse_overrides(
    overrides: Overrides | typing.Mapping[str, typing.Any] | None,
) -> Overrides:
    """Build an override tree.

    Raises:
        pydantic.ValidationError: If a leaf is not a string or a callable, or
            a callable does not accept its rule's parameters
    """
    if overrides is None:
        return Overrides()
    if isinstance(overrides, Overrides):
        return overrides
    return Overrides.model_validate(overrides)
