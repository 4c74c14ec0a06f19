"""Tests for the ComplexVector class."""

import numpy as np
import pytest

from numerics.core.errors import OutOfRangeError, RangeError
from numerics.numeric import Complex
from numerics.vector import ComplexVector, norm, resize


class TestComplexVectorInstantiation:
    """Test construction from the supported complex inputs."""

    def test_elements_become_complex(self):
        """Test that plain numbers are stored as Complex."""
        v = ComplexVector([1, 2j, Complex(3, 4)])
        assert all(isinstance(c, Complex) for c in v)
        assert v[1] == Complex(0, 2)

    def test_create_from_length(self):
        """Test ComplexVector(n) is zero filled."""
        v = ComplexVector(2)
        assert v.to_list() == [Complex(0, 0), Complex(0, 0)]

    def test_string_literals_are_parsed(self):
        """Test "a+bi" literals."""
        v = ComplexVector(["1+2i", "-3i"])
        assert v.to_list() == [Complex(1, 2), Complex(0, -3)]

    def test_invalid_literal_raises_type_error(self):
        """Test that an unparseable string is not a complex scalar."""
        with pytest.raises(TypeError):
            ComplexVector(["not a number"])

    def test_index_out_of_range(self):
        """Test bounds checking."""
        with pytest.raises(OutOfRangeError):
            ComplexVector(1)[1]


class TestComplexVectorArithmetic:
    """Test complex vector operators."""

    def test_dot_product_is_not_conjugated(self):
        """Test that v * w is sum(v[i] * w[i]) without conjugation."""
        v = ComplexVector([1j])
        assert v * v == Complex(-1, 0)

    def test_dot_product_length_mismatch(self):
        """Test that dot products require equal lengths."""
        with pytest.raises(RangeError):
            ComplexVector([1, 2]) * ComplexVector([1])

    def test_addition_and_subtraction(self):
        """Test element-wise + and -."""
        a = ComplexVector([Complex(1, 1), Complex(2, 0)])
        b = ComplexVector([Complex(0, 1), Complex(1, 1)])
        assert a + b == ComplexVector([Complex(1, 2), Complex(3, 1)])
        assert a + b - b == a

    def test_scalar_multiplication_with_complex_scalar(self):
        """Test scaling by an imaginary unit."""
        v = ComplexVector([1, 1j])
        assert v * 1j == ComplexVector([1j, -1])
        assert 2 * v == ComplexVector([2, 2j])

    def test_scalar_division(self):
        """Test dividing by a complex scalar."""
        v = ComplexVector([2j, 4])
        assert v / 2 == ComplexVector([1j, 2])

    def test_division_by_zero_raises(self):
        """Test v / 0 raises ZeroDivisionError."""
        with pytest.raises(ZeroDivisionError):
            ComplexVector([1]) / 0

    def test_norm_uses_magnitudes(self):
        """Test the Euclidean norm of a complex vector."""
        assert ComplexVector([Complex(3, 4)]).norm() == pytest.approx(5.0)
        assert norm(ComplexVector([1j, 1])) == pytest.approx(2 ** 0.5)


class TestComplexVectorUtilities:
    """Test the utilities available without an ordering."""

    def test_search_utilities(self):
        """Test predicate searches work on complex values."""
        v = ComplexVector([1, 1j, 2j])
        assert v.find_index(lambda c: c.imag > 0) == 1
        assert v.find_last(lambda c: c.imag > 0) == Complex(0, 2)
        assert v.index_of(Complex(1, 0)) == 0
        assert v.find_all(lambda c: c.real == 0) == ComplexVector([1j, 2j])

    def test_has_no_ordering_utilities(self):
        """Test sort and binary_search exist only on real vectors."""
        v = ComplexVector([1, 2])
        assert not hasattr(v, "sort")
        assert not hasattr(v, "binary_search")

    def test_resize(self):
        """Test resize pads with complex zero."""
        assert resize(ComplexVector([1j]), 2) == ComplexVector([1j, 0])

    def test_clone_is_independent(self):
        """Test mutating a clone leaves the original unchanged."""
        v = ComplexVector([1, 2])
        c = v.clone()
        c[0] = 5j
        assert v[0] == Complex(1, 0)

    def test_to_numpy_is_complex(self):
        """Test numpy conversion uses a complex dtype."""
        arr = ComplexVector([1, 2j]).to_numpy()
        assert arr.dtype == np.complex128
        np.testing.assert_array_equal(arr, np.array([1, 2j]))

    def test_to_string(self):
        """Test text rendering."""
        assert str(ComplexVector([Complex(1, 2), 3])) == "[1 + 2i\t3]"

    def test_compare_within_tolerance(self):
        """Test fuzzy comparison part by part."""
        a = ComplexVector([Complex(1, 1)])
        assert a.compare(ComplexVector([Complex(1.0002, 1)]))
        assert not a.compare(ComplexVector([Complex(1, 2)]))

    def test_serialization_round_trip(self, assert_serializable):
        """Test model_dump output rebuilds the same vector."""
        v = ComplexVector([Complex(1, 2), Complex(0, -1)])
        rebuilt = assert_serializable(v, ComplexVector)
        assert rebuilt == v
