"""Tests for the SquareMatrix class."""

import logging
from fractions import Fraction

import pytest

from numerics.core.errors import OutOfRangeError, StructuralError
from numerics.matrix import Matrix, SquareMatrix, identity


class TestSquareMatrixInstantiation:
    """Test square matrix construction."""

    def test_create_from_dimension(self):
        """Test SquareMatrix(n) is an n x n zero matrix."""
        s = SquareMatrix(3)
        assert s.dim == 3
        assert s.shape == (3, 3)
        assert s.determinant == 0

    def test_create_from_rows(self, s3):
        """Test creating from square rows."""
        assert s3.dim == 3
        assert s3[0, 1] == 3

    def test_non_square_rows_raise(self):
        """Test that rectangular rows are rejected."""
        with pytest.raises(StructuralError):
            SquareMatrix([[1, 2, 3], [4, 5, 6]])

    def test_non_square_dimensions_raise(self):
        """Test SquareMatrix(rows, cols) with rows != cols."""
        with pytest.raises(StructuralError):
            SquareMatrix(2, 3)

    def test_empty_square_matrix(self):
        """Test the 0 x 0 square matrix."""
        s = SquareMatrix(0)
        assert s.dim == 0
        assert str(s) == "[ ]"
        assert s.determinant == 0


class TestSquareMatrixAlgebra:
    """Test determinant, minors, cofactors, adjugate and inverse."""

    def test_identity(self):
        """Test identity() builds a square identity."""
        i3 = identity(3)
        assert isinstance(i3, SquareMatrix)
        assert i3 == SquareMatrix([[1, 0, 0], [0, 1, 0], [0, 0, 1]])
        assert i3.determinant == 1

    def test_identity_of_general_kind(self):
        """Test identity() honours the requested kind."""
        assert type(identity(2, Matrix)) is Matrix

    def test_determinant_3x3(self, s3):
        """Test a 3x3 determinant."""
        assert s3.determinant == 1

    def test_determinant_4x4_diagonal(self):
        """Test the determinant of a diagonal matrix is the product of the diagonal."""
        d = SquareMatrix([[2, 0, 0, 0], [0, 3, 0, 0], [0, 0, 4, 0], [0, 0, 0, 5]])
        assert d.determinant == 120

    def test_determinant_of_transpose(self):
        """Test det(M^T) == det(M)."""
        m = SquareMatrix([[6, 1, 1], [4, -2, 5], [2, 8, 7]])
        assert m.transpose().determinant == m.determinant

    def test_minor(self, s3):
        """Test removing a row and a column."""
        minor = s3.minor(0, 1)
        assert isinstance(minor, SquareMatrix)
        assert minor == SquareMatrix([[1, 1], [1, 1]])

    def test_minor_out_of_range(self, s3):
        """Test minor indices are bounds checked."""
        with pytest.raises(OutOfRangeError):
            s3.minor(3, 0)

    def test_minor_does_not_alias(self, s3):
        """Test mutating a minor leaves the matrix unchanged."""
        minor = s3.minor(0, 0)
        minor[0, 0] = 100
        assert s3[1, 1] == 2

    def test_cofactor_sign(self):
        """Test cofactors alternate sign."""
        m = SquareMatrix([[1, 2], [3, 4]])
        assert m.cofactor(0, 0) == 4
        assert m.cofactor(0, 1) == -3
        assert m.cofactor(1, 0) == -2
        assert m.cofactor(1, 1) == 1

    def test_adjugate(self):
        """Test adjugate of a 2x2 matrix."""
        m = SquareMatrix([[1, 2], [3, 4]])
        assert m.adjugate() == SquareMatrix([[4, -2], [-3, 1]])

    def test_adjugate_1x1_is_one(self):
        """Test adj([[a]]) == [[1]]."""
        assert SquareMatrix([[5]]).adjugate() == SquareMatrix([[1]])

    def test_inverse_1x1(self):
        """Test the 1x1 inverse is the reciprocal."""
        assert SquareMatrix([[4]]).inverse() == SquareMatrix([[0.25]])

    def test_inverse_3x3(self, s3):
        """Test M * M^-1 == I for a 3x3 matrix."""
        inv = s3.inverse()
        assert isinstance(inv, SquareMatrix)
        assert s3 * inv == identity(3)
        assert inv * s3 == identity(3)

    def test_inverse_with_fractions_is_exact(self):
        """Test rational entries stay rational through inversion."""
        m = SquareMatrix([[Fraction(1, 2), 1], [1, 1]])
        inv = m.inverse()
        assert inv == SquareMatrix([[-2, 2], [2, -1]])
        assert all(isinstance(el, Fraction) for row in inv for el in row)
        assert m * inv == identity(2)

    def test_inverse_of_inverse(self, s3):
        """Test (M^-1)^-1 == M."""
        assert s3.inverse().inverse().compare(s3)

    def test_inverse_of_large_matrix_warns_once(self, monkeypatch, caplog):
        """Test inversion reports the expansion cost once, not once per cofactor."""
        monkeypatch.setenv("NUMERICS_LAPLACE_WARN_DIM", "2")
        m = SquareMatrix([[2, 0, 0, 0], [0, 2, 0, 0], [0, 0, 2, 0], [0, 0, 0, 2]])
        with caplog.at_level(logging.WARNING, logger="numerics.laplace"):
            inv = m.inverse()

        warnings = [r for r in caplog.records if r.levelno == logging.WARNING]
        assert len(warnings) == 1
        assert "4x4" in warnings[0].getMessage()
        assert inv == SquareMatrix([[0.5, 0, 0, 0], [0, 0.5, 0, 0], [0, 0, 0.5, 0], [0, 0, 0, 0.5]])

    def test_power(self, s3):
        """Test powers keep the square kind."""
        cube = s3 ** 3
        assert isinstance(cube, SquareMatrix)
        assert cube == s3 * s3 * s3

    def test_trace(self, s3):
        """Test trace of the 3x3 fixture."""
        assert s3.trace() == 5


class TestSquareMatrixConversions:
    """Test conversions between the square and general kinds."""

    def test_to_matrix(self, s3):
        """Test converting to the general kind."""
        m = s3.to_matrix()
        assert type(m) is Matrix
        assert m == s3

    def test_to_matrix_copies(self, s3):
        """Test the converted matrix is independent."""
        m = s3.to_matrix()
        m[0, 0] = 0
        assert s3[0, 0] == 2

    def test_clone_keeps_kind(self, s3):
        """Test clone returns a SquareMatrix."""
        assert type(s3.clone()) is SquareMatrix

    def test_transpose_keeps_kind(self, s3):
        """Test transpose of a square matrix is square."""
        assert type(s3.transpose()) is SquareMatrix

    def test_serialization_round_trip(self, s3, assert_serializable):
        """Test model_dump output rebuilds the same matrix."""
        rebuilt = assert_serializable(s3, SquareMatrix)
        assert rebuilt == s3
