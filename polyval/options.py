"""Execution options for validation operations."""

from enum import Enum


class Strategy(str, Enum):
    """Options for how a record is checked against its schema.

    Attributes:
        DIRECT: Walk the schema field by field with the built-in checks
        PYDANTIC: Convert the schema to pydantic nodes and translate their errors
    """

    DIRECT = "direct"
    PYDANTIC = "pydantic"
