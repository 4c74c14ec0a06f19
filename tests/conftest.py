"""
Shared pytest fixtures for testing the numerics containers.

This module provides:
- Fixtures for building common vectors and matrices
- Utilities for testing Pydantic serialization
- Isolation of cached settings between tests
"""

import pytest
from typing import Any, Type, TypeVar
from pydantic import BaseModel

from numerics.core.config import get_settings
from numerics.matrix import Matrix, SquareMatrix


T = TypeVar('T', bound=BaseModel)


@pytest.fixture(autouse=True)
def fresh_settings():
    """Re-read settings for every test so monkeypatched env vars take effect."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def m2():
    """The 2x2 matrix [[1, 2], [3, 4]] (determinant -2)."""
    return Matrix([[1, 2], [3, 4]])


@pytest.fixture
def s3():
    """An invertible 3x3 SquareMatrix with determinant 1."""
    return SquareMatrix([[2, 3, 1], [1, 2, 1], [1, 1, 1]])


@pytest.fixture
def assert_model_equality():
    """Helper to assert that two Pydantic models are equal."""
    def _assert_equal(model1: BaseModel, model2: BaseModel, ignore_fields: set[str] | None = None) -> None:
        """
        Assert that two models are equal, optionally ignoring certain fields.

        Args:
            model1: First model to compare
            model2: Second model to compare
            ignore_fields: Set of field names to ignore in comparison
        """
        ignore_fields = ignore_fields or set()

        dict1 = model1.model_dump(exclude=ignore_fields)
        dict2 = model2.model_dump(exclude=ignore_fields)

        assert dict1 == dict2, f"Models not equal:\n{dict1}\n!=\n{dict2}"

    return _assert_equal


@pytest.fixture
def assert_serializable():
    """Helper to assert that a model can be serialized and deserialized."""
    def _assert_serialization(
        model: BaseModel,
        model_class: Type[T],
        exclude_fields: set[str] | None = None,
    ) -> T:
        """
        Assert that a model can be serialized to dict and reconstructed.

        Args:
            model: The model instance to test
            model_class: The model class for reconstruction
            exclude_fields: Fields to exclude from serialization

        Returns:
            The reconstructed model
        """
        serialized: dict[str, Any] = model.model_dump(exclude=exclude_fields or set())

        reconstructed = model_class(**serialized)

        assert reconstructed.model_dump(exclude=exclude_fields or set()) == serialized

        return reconstructed

    return _assert_serialization
