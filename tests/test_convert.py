"""Tests for polyval.convert module."""

import datetime

import pydantic
import pytest

from polyval.convert import convert_schema, run_schema
from polyval.schema import parse_schema


@pytest.fixture
def converted():
    """Fixture providing a converted schema with one field per type."""
    return convert_schema(
        parse_schema(
            {
                "username": {"type": "string", "required": True, "min": 3, "numeric": True},
                "age": {"type": "number", "min": 18, "max": 99},
                "subscribed": {"type": "boolean", "equals": True},
                "birthday": {"type": "date", "max": "2010-01-01"},
            }
        )
    )


def test_convert_schema_model(converted):
    """Test that the record model is a pydantic model keyed by field names."""
    assert issubclass(converted.model, pydantic.BaseModel)
    aliases = [info.alias for info in converted.model.model_fields.values()]
    assert aliases == ["username", "age", "subscribed", "birthday"]


def test_convert_schema_checks(converted):
    """Test the per-field checks and their rule codes."""
    codes = {name: [code for code, _ in checks] for name, checks in converted.checks.items()}

    assert codes == {
        "username": ["min", "numeric"],
        "age": ["min", "max"],
        "subscribed": ["equals"],
        "birthday": ["max"],
    }


def test_run_schema_valid(converted):
    """Test that a valid record yields no errors."""
    record = {
        "username": "12345",
        "age": 30,
        "subscribed": True,
        "birthday": datetime.datetime(2000, 5, 17),
    }

    assert run_schema(converted, record) == []


def test_run_schema_tags_checks(converted):
    """Test that each check error names the rule that raised it."""
    record = {
        "username": "ab",
        "age": 120,
        "subscribed": False,
        "birthday": datetime.datetime(2015, 1, 1),
    }
    errors = run_schema(converted, record)

    assert [(e["loc"], e["ctx"]["validation"]) for e in errors] == [
        (("username",), "min"),
        (("username",), "numeric"),
        (("age",), "max"),
        (("subscribed",), "equals"),
        (("birthday",), "max"),
    ]
    assert errors[0]["type"] == "string_too_short"
    assert errors[1]["type"] == "string_numeric"
    assert errors[2]["type"] == "less_than_equal"
    assert errors[3]["type"] == "literal_error"


def test_run_schema_type_errors_skip_checks(converted):
    """Test that missing or mistyped fields are not constraint-checked."""
    record = {"age": "old", "subscribed": 1, "birthday": "2015-01-01"}
    errors = run_schema(converted, record)

    assert [(e["loc"], e["type"]) for e in errors] == [
        (("username",), "missing"),
        (("age",), "float_type"),
        (("subscribed",), "bool_type"),
        (("birthday",), "is_instance_of"),
    ]


def test_run_schema_required_blank(converted):
    """Test that None and '' fail a required field as missing."""
    for blank in (None, ""):
        errors = run_schema(converted, {"username": blank})
        assert [e["type"] for e in errors] == ["missing"]


def test_run_schema_invalid_pattern():
    """Test that a malformed pattern becomes a failing check."""
    converted = convert_schema(parse_schema({"code": {"type": "string", "regex": "[a-"}}))
    errors = run_schema(converted, {"code": "abc"})

    assert [e["type"] for e in errors] == ["invalid_pattern"]


def test_run_schema_pattern_search():
    """Test that patterns match anywhere in the value unless anchored."""
    converted = convert_schema(
        parse_schema(
            {
                "loose": {"type": "string", "regex": "[0-9]"},
                "anchored": {"type": "string", "regex": "^[0-9]+$"},
            }
        )
    )
    errors = run_schema(converted, {"loose": "abc1", "anchored": "abc1"})

    assert [(e["loc"], e["ctx"]["pattern"]) for e in errors] == [
        (("anchored",), "^[0-9]+$")
    ]


def test_run_schema_any_field_name():
    """Test field names that are not Python identifiers."""
    converted = convert_schema(
        parse_schema({"first name": {"type": "string", "required": True}})
    )

    assert run_schema(converted, {"first name": "Ada"}) == []
    assert run_schema(converted, {})[0]["loc"] == ("first name",)


def test_run_schema_date_values():
    """Test that plain dates pass the type layer and are bound-checked."""
    converted = convert_schema(
        parse_schema({"born": {"type": "date", "min": "2000-01-01"}})
    )

    assert run_schema(converted, {"born": datetime.date(2000, 1, 1)}) == []
    errors = run_schema(converted, {"born": datetime.date(1999, 12, 31)})
    assert [(e["type"], e["ctx"]["validation"]) for e in errors] == [
        ("greater_than_equal", "min")
    ]


def test_run_schema_shared_formats():
    """Test that email and url checks raise the shared format errors."""
    converted = convert_schema(
        parse_schema(
            {
                "mail": {"type": "string", "email": True},
                "site": {"type": "string", "url": True},
            }
        )
    )
    errors = run_schema(converted, {"mail": "x@test.test", "site": "mailto:a@b.org"})

    assert [(e["type"], e["ctx"]["validation"]) for e in errors] == [
        ("string_email", "email"),
        ("string_url", "url"),
    ]
