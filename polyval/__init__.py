"""Validate flat records against declarative rules, with localized messages.

A Python package for checking records against a rule schema and turning every
failed rule into a 'Field: message' string, with per-language defaults and
layered custom messages. Records are checked directly or through pydantic.
"""

__version__ = "1.0.1"

from polyval.validate import (
    validate,
    validate_direct,
    validate_pydantic,
    collect_issues,
    UNEXPECTED_ERROR_MESSAGE,
)
from polyval.options import Strategy
from polyval.schema import FieldRule, FieldType, Schema, parse_schema
from polyval.rules import CustomValidator
from polyval.overrides import Overrides, parse_overrides
from polyval.result import Issue, IssueKind
from polyval.resolve import format_message
from polyval.messages import DEFAULT_LANGUAGE, available_languages, get_messages
from polyval.convert import ConvertedSchema, convert_schema, run_schema
from polyval.translate import translate_errors

__all__ = [
    "validate",
    "validate_direct",
    "validate_pydantic",
    "collect_issues",
    "UNEXPECTED_ERROR_MESSAGE",
    "Strategy",
    "FieldRule",
    "FieldType",
    "Schema",
    "parse_schema",
    "CustomValidator",
    "Overrides",
    "parse_overrides",
    "Issue",
    "IssueKind",
    "format_message",
    "DEFAULT_LANGUAGE",
    "available_languages",
    "get_messages",
    "ConvertedSchema",
    "convert_schema",
    "run_schema",
    "translate_errors",
]
