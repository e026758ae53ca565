"""
Shared pytest fixtures for tugon tests.

This module provides:
- A helper for asserting pydantic validation failures
- A helper that reduces classified tokens to their status values
"""

import pytest
from typing import Any, Type
from pydantic import BaseModel, ValidationError


@pytest.fixture
def assert_validation_error():
    """Helper to assert that a ValidationError is raised with expected details."""
    def _assert_validation(
        model_class: Type[BaseModel],
        data: dict[str, Any],
        expected_field: str | None = None,
    ) -> ValidationError:
        """
        Assert that creating a model raises ValidationError.

        Args:
            model_class: The Pydantic model class
            data: Invalid data to pass to model
            expected_field: Expected field name in error (optional)

        Returns:
            The ValidationError that was raised
        """
        with pytest.raises(ValidationError) as exc_info:
            model_class(**data)

        error = exc_info.value
        if expected_field:
            field_errors = [e for e in error.errors() if e['loc'][0] == expected_field]
            assert len(field_errors) > 0, f"Expected error for field '{expected_field}' not found"

        return error

    return _assert_validation


@pytest.fixture
def statuses():
    """Reduce a classified token sequence to its list of status values."""
    def _statuses(classified) -> list[str]:
        return [item.status.value for item in classified]
    return _statuses
