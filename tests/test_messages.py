"""Tests for polyval.messages package."""

import datetime

import pytest

from polyval.messages import (
    CATALOG,
    DEFAULT_LANGUAGE,
    available_languages,
    catalog_message,
    get_messages,
)
from polyval.overrides import RULE_ARITY


def test_available_languages():
    """Test the registered languages."""
    assert available_languages() == ["en", "tr"]
    assert DEFAULT_LANGUAGE == "en"


def test_get_messages_fallback():
    """Test that unknown languages get the default dictionary."""
    assert get_messages("tr") is CATALOG["tr"]
    assert get_messages("fr") is CATALOG["en"]


@pytest.mark.parametrize("language", ["en", "tr"])
def test_catalog_covers_every_rule(language):
    """Test that every rule has a message in every language."""
    messages = get_messages(language)
    for group, arities in RULE_ARITY.items():
        assert set(messages[group]) == set(arities)
    for key in ("required", "invalid_type", "equals", "not_equals"):
        assert key in messages


@pytest.mark.parametrize("language", ["en", "tr"])
def test_parameterized_messages_contain_numerals(language):
    """Test that bound messages mention their bound."""
    assert "3" in catalog_message(language, "string", "min").render(3)
    assert "20" in catalog_message(language, "string", "max").render(20)
    assert "18" in catalog_message(language, "number", "min").render(18)
    assert '"https"' in catalog_message(language, "string", "starts_with").render("https")


def test_date_messages_are_localized():
    """Test that date bounds render in each language's date format."""
    bound = datetime.datetime(2024, 2, 29)

    assert catalog_message("en", "date", "max").render(bound) == "Must be before 2024-02-29"
    assert catalog_message("tr", "date", "max").render(bound) == (
        "29.02.2024 tarihinden önce olmalıdır"
    )


def test_catalog_message_general_codes():
    """Test messages outside rule groups."""
    assert catalog_message("tr", None, "required").render() == "Bu alan zorunludur"
    assert catalog_message("en", None, "not_equals").render("old") == (
        "Must not match the old field"
    )


def test_catalog_message_missing():
    """Test lookups with no entry in any language."""
    assert catalog_message("en", "string", "nickname") is None
    assert catalog_message("tr", None, "uuid_parsing") is None
