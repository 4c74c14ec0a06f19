"""
numerics - dense linear algebra kernel

Vector and matrix value types generic over a scalar field with:
- Real and complex scalars
- Operator overloading
- Laplace-expansion determinant and adjugate inverse
- Fuzzy comparison
- Text and TeX output formats
"""

from .core.errors import (
    DimensionMismatchError,
    InvalidCastError,
    NumericsError,
    OutOfRangeError,
    RangeError,
    SingularMatrixError,
    StructuralError,
)
from .matrix import (
    BaseMatrix,
    ComplexMatrix,
    Matrix,
    SquareComplexMatrix,
    SquareMatrix,
    identity,
    matrix_power,
)
from .numeric import Complex, fuzzy_compare
from .point import Point
from .scalar import COMPLEX, REAL, ComplexField, RealField, ScalarField
from .value import LinearValue, ToleranceMode
from .vector import BaseVector, ComplexVector, Vector, dot, norm, resize

__all__ = [
    "LinearValue",
    "ToleranceMode",
    "ScalarField",
    "RealField",
    "ComplexField",
    "REAL",
    "COMPLEX",
    "Complex",
    "fuzzy_compare",
    "BaseVector",
    "Vector",
    "ComplexVector",
    "dot",
    "norm",
    "resize",
    "BaseMatrix",
    "Matrix",
    "SquareMatrix",
    "ComplexMatrix",
    "SquareComplexMatrix",
    "identity",
    "matrix_power",
    "Point",
    "NumericsError",
    "OutOfRangeError",
    "StructuralError",
    "DimensionMismatchError",
    "SingularMatrixError",
    "RangeError",
    "InvalidCastError",
]
