"""Type aliases for validation inputs."""

import datetime as _datetime
import typing


Value = str | int | float | bool | _datetime.date | None
"""Type alias for a single field value.

A Value is whatever a flat record may hold for one field: text, a number,
a boolean, a date or datetime, or None for an absent value.
"""

Record = typing.Mapping[str, typing.Any]
"""Type alias for a record that can be validated.

A Record is a flat mapping from field name to Value.
"""
