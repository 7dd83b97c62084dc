"""Shared pytest fixtures for polyval tests."""

import typing
import pytest

from polyval.options import Strategy


@pytest.fixture(params=list(Strategy), ids=lambda s: s.value)
def strategy(request: pytest.FixtureRequest) -> Strategy:
    """Fixture running a test once per validation strategy."""
    return request.param


@pytest.fixture
def signup_schema() -> dict[str, typing.Any]:
    """Fixture providing a schema with string and number rules."""
    return {
        "username": {"type": "string", "required": True, "min": 3, "max": 20},
        "email": {"type": "string", "required": True, "email": True},
        "age": {"type": "number", "min": 18},
    }


@pytest.fixture
def invalid_signup() -> dict[str, typing.Any]:
    """Fixture providing a record breaking one rule per field."""
    return {"username": "jo", "email": "invalid-email", "age": 16}


@pytest.fixture
def valid_signup() -> dict[str, typing.Any]:
    """Fixture providing a record satisfying every signup rule."""
    return {"username": "alice", "email": "alice@company.org", "age": 30}


@pytest.fixture
def password_schema() -> dict[str, typing.Any]:
    """Fixture providing a schema with field comparisons and a boolean literal."""
    return {
        "password": {"type": "string", "required": True, "min": 8},
        "confirmPassword": {"type": "string", "required": True, "equals": "password"},
        "acceptTerms": {"type": "boolean", "required": True, "equals": True},
    }
