"""Tests for the kernel exception hierarchy."""

import pytest

from numerics.core.errors import (
    DimensionMismatchError,
    InvalidCastError,
    NumericsError,
    OutOfRangeError,
    RangeError,
    SingularMatrixError,
    StructuralError,
)


class TestErrorHierarchy:
    """Test every error is a NumericsError and the matching builtin."""

    @pytest.mark.parametrize(
        "error_class, builtin",
        [
            (OutOfRangeError, IndexError),
            (StructuralError, ValueError),
            (DimensionMismatchError, ValueError),
            (SingularMatrixError, ValueError),
            (RangeError, ValueError),
            (InvalidCastError, TypeError),
        ],
    )
    def test_bases(self, error_class, builtin):
        """Test the kernel and builtin base classes."""
        assert issubclass(error_class, NumericsError)
        assert issubclass(error_class, builtin)

    def test_shape_errors_are_structural(self):
        """Test dimension and singularity errors are structural."""
        assert issubclass(DimensionMismatchError, StructuralError)
        assert issubclass(SingularMatrixError, StructuralError)
        assert not issubclass(RangeError, StructuralError)


class TestErrorDetails:
    """Test messages and details dictionaries."""

    def test_base_error(self):
        """Test message and default details."""
        error = NumericsError("boom")
        assert error.message == "boom"
        assert error.details == {}
        assert str(error) == "boom"

    def test_out_of_range(self):
        """Test index and bounds are recorded."""
        error = OutOfRangeError(5, (0, 3))
        assert error.details == {"index": 5, "bounds": (0, 3)}
        assert "5" in error.message

    def test_dimension_mismatch(self):
        """Test operation and operand dimensions are recorded."""
        error = DimensionMismatchError("+", (2, 2), (2, 3))
        assert error.details == {"operation": "+", "left": (2, 2), "right": (2, 3)}
        assert "'+'" in str(error)

    def test_singular_matrix(self):
        """Test the dimension is recorded."""
        error = SingularMatrixError(3)
        assert error.details == {"dim": 3}
        assert "singular" in error.message

    def test_invalid_cast(self):
        """Test source, target and shape are recorded."""
        error = InvalidCastError("Matrix", "SquareMatrix", (2, 3))
        assert error.details["target"] == "SquareMatrix"
        assert "(2, 3)" in str(error)

    def test_structural_error_with_details(self):
        """Test free-form structural errors carry details."""
        error = StructuralError("ragged", details={"row_lengths": [2, 1]})
        assert error.details["row_lengths"] == [2, 1]
