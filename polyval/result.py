"""Issue types produced by both validation strategies."""

import typing as _t
from enum import Enum

REQUIRED = "required"
INVALID_TYPE = "invalid_type"
MIN = "min"
MAX = "max"
LENGTH = "length"
EMAIL = "email"
URL = "url"
UUID = "uuid"
CUID = "cuid"
DATETIME = "datetime"
IP = "ip"
REGEX = "regex"
STARTS_WITH = "starts_with"
ENDS_WITH = "ends_with"
NUMERIC = "numeric"
EQUALS = "equals"
NOT_EQUALS = "not_equals"
CUSTOM = "custom"
INVALID_PATTERN = "invalid_pattern"

GENERAL_CODES = (REQUIRED, INVALID_TYPE)
RELATION_CODES = (EQUALS, NOT_EQUALS)

INVALID_PATTERN_MESSAGE = "Invalid regex pattern"


class IssueKind(str, Enum):
    """Classes of validation failure.

    Attributes:
        MISSING_REQUIRED: Required field absent, None or empty
        TYPE_MISMATCH: Value's runtime kind differs from the declared type
        CONSTRAINT_VIOLATION: A length, bound or format rule failed
        CROSS_FIELD_VIOLATION: An equals/not_equals comparison failed
        CUSTOM_VIOLATION: A custom predicate returned an error
        INTERNAL_FAULT: The rule itself could not be evaluated
    """

    MISSING_REQUIRED = "missing_required"
    TYPE_MISMATCH = "type_mismatch"
    CONSTRAINT_VIOLATION = "constraint_violation"
    CROSS_FIELD_VIOLATION = "cross_field_violation"
    CUSTOM_VIOLATION = "custom_violation"
    INTERNAL_FAULT = "internal_fault"


class Issue(_t.NamedTuple):
    """A single failed rule, before its message is resolved.

    Attributes:
        field: Name of the field the rule belongs to
        code: Rule code (e.g. 'min', 'email', 'required')
        params: Parameters the message providers are called with
        group: Rule group ('string', 'number', 'date', 'boolean') or None for
            general and field-comparison codes
        value: The value that failed
        message: Text carried by the issue itself (predicate output, or the
            pydantic message on the library path)
        message_key: Key of the custom validator that produced the issue
    """

    field: str
    code: str
    params: tuple[_t.Any, ...] = ()
    group: str | None = None
    value: _t.Any = None
    message: str | None = None
    message_key: str | None = None

    @property
    def kind(self) -> IssueKind:
        """Classify the issue."""
        if self.code == REQUIRED:
            return IssueKind.MISSING_REQUIRED
        if self.code == INVALID_TYPE:
            return IssueKind.TYPE_MISMATCH
        if self.code == CUSTOM:
            return IssueKind.CUSTOM_VIOLATION
        if self.code == INVALID_PATTERN:
            # reported per field, the rest of the record is still checked
            return IssueKind.INTERNAL_FAULT
        if self.code in RELATION_CODES and self.group is None:
            return IssueKind.CROSS_FIELD_VIOLATION
        return IssueKind.CONSTRAINT_VIOLATION
