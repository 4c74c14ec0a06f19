"""
Dense matrices: Matrix, SquareMatrix, ComplexMatrix and SquareComplexMatrix.

All four are instances of one generic engine, BaseMatrix, parameterized by
a ScalarField. The square kinds enforce rows == columns at construction and
otherwise share every algorithm with the rectangular kinds.

Determinant and inverse use cofactor expansion (see numerics.laplace):
exact for integer and rational entries, but O(n!) in the dimension.
"""

from __future__ import annotations

import numbers
from typing import Any, ClassVar, Iterable, Iterator

import numpy as np
from pydantic import BaseModel, ConfigDict, Field, field_validator

from . import laplace
from .core.errors import (
    DimensionMismatchError,
    InvalidCastError,
    OutOfRangeError,
    RangeError,
    SingularMatrixError,
    StructuralError,
)
from .core.logging import get_logger
from .numeric import Complex, fuzzy_compare
from .scalar import COMPLEX, REAL, ScalarField
from .value import LinearValue
from .vector import BaseVector, ComplexVector, Vector

logger = get_logger(__name__)


class BaseMatrix(BaseModel, LinearValue):
    """
    Rectangular grid of scalars stored row-major.

    Construct with (rows, columns) for a zero matrix, or from a 2-D
    iterable, numpy array or another matrix (copied).
    """

    model_config = ConfigDict(arbitrary_types_allowed=True, validate_assignment=True)

    scalar_field: ClassVar[ScalarField] = REAL
    vector_class: ClassVar[type[BaseVector]] = Vector
    is_square_kind: ClassVar[bool] = False

    # numpy defers binary operators to the matrix's reflected methods
    __array_ufunc__ = None

    # Shape is fixed after construction; elements change through m[i, j]
    entries: list[list[Any]] = Field(default_factory=list, frozen=True)
    column_count: int = Field(default=0, frozen=True)

    def __init__(
        self,
        *args: Any,
        entries: Iterable[Iterable[Any]] | None = None,
        column_count: int | None = None,
        **kwargs: Any,
    ) -> None:
        if entries is not None and args:
            raise ValueError(f"{self.__class__.__name__} accepts either positional arguments or entries, not both")

        if entries is not None:
            rows, columns = self._coerce_rows(entries)
            if not rows and column_count is not None:
                columns = column_count
        else:
            rows, columns = self._parse_arguments(args)

        self._check_shape(len(rows), columns)
        super().__init__(entries=rows, column_count=columns, **kwargs)

    @classmethod
    def _parse_arguments(cls, args: tuple[Any, ...]) -> tuple[list[list[Any]], int]:
        """Parse positional constructor arguments into (rows, column count)."""
        if len(args) == 0:
            return [], 0

        if len(args) == 2:
            return cls._zeros(*args)

        if len(args) == 1:
            single = args[0]
            if _is_int(single):
                return cls._from_dimension(single)
            return cls._coerce_rows(single)

        raise TypeError(f"{cls.__name__} takes at most 2 positional arguments ({len(args)} given)")

    @classmethod
    def _from_dimension(cls, dim: int) -> tuple[list[list[Any]], int]:
        raise TypeError(f"{cls.__name__} requires both rows and columns, got only {dim}")

    @classmethod
    def _zeros(cls, rows: Any, columns: Any) -> tuple[list[list[Any]], int]:
        if not (_is_int(rows) and _is_int(columns)):
            raise TypeError(f"{cls.__name__} dimensions must be integers")
        if rows < 0 or columns < 0:
            raise RangeError(
                f"Matrix dimensions must be non-negative, got {rows}x{columns}",
                details={"rows": int(rows), "columns": int(columns)},
            )
        zero = cls.scalar_field.zero
        return [[zero] * int(columns) for _ in range(int(rows))], int(columns)

    @classmethod
    def _coerce_rows(cls, raw: Any) -> tuple[list[list[Any]], int]:
        """Copy raw rows into new lists of field elements, checking they are rectangular."""
        if isinstance(raw, BaseMatrix):
            return [[cls.scalar_field.coerce(v) for v in row] for row in raw.entries], raw.columns

        if isinstance(raw, np.ndarray):
            if raw.size == 0 and raw.ndim < 2:
                return [], 0
            if raw.ndim != 2:
                raise StructuralError(
                    f"Matrix requires a two-dimensional array, got shape {raw.shape}",
                    details={"shape": raw.shape},
                )
            raw = raw.tolist()

        if isinstance(raw, (str, bytes)) or not isinstance(raw, Iterable):
            raise TypeError("Matrix rows must be iterable sequences")

        normalized: list[list[Any]] = []
        for row in raw:
            if isinstance(row, BaseVector):
                row = row.components
            if isinstance(row, np.ndarray):
                row = row.tolist()
            if isinstance(row, (str, bytes)) or not isinstance(row, Iterable):
                raise TypeError("Matrix rows must be iterable sequences")
            normalized.append([cls.scalar_field.coerce(cell) for cell in row])

        columns = len(normalized[0]) if normalized else 0
        if not all(len(row) == columns for row in normalized):
            raise StructuralError(
                "Matrix rows must all have same length",
                details={"row_lengths": [len(row) for row in normalized]},
            )
        return normalized, columns

    @classmethod
    def _check_shape(cls, rows: int, columns: int) -> None:
        """Hook for kinds that restrict their shape."""

    @field_validator("entries", mode="before")
    @classmethod
    def _validate_entries(cls, value):
        if value is None:
            return []
        rows, columns = cls._coerce_rows(value)
        if rows:
            cls._check_shape(len(rows), columns)
        return rows

    @classmethod
    def _as_scalar(cls, other: Any) -> Any | None:
        """Coerce an arithmetic operand to a field element, None if it is not a scalar."""
        if isinstance(other, (bool, np.bool_)):
            return None
        if isinstance(other, (numbers.Number, Complex)):
            try:
                return cls.scalar_field.coerce(other)
            except TypeError:
                return None
        return None

    def _same_kind(self, other: Any) -> bool:
        return isinstance(other, BaseMatrix) and other.scalar_field is self.scalar_field

    def _with_entries(self, entries: list[list[Any]], columns: int, kind: type[BaseMatrix] | None = None):
        """New matrix of the given kind (default: this matrix's kind) owning entries."""
        kind = kind or self.__class__
        return kind(entries=entries, column_count=columns)

    # Shape

    @property
    def rows(self) -> int:
        return len(self.entries)

    @property
    def columns(self) -> int:
        return len(self.entries[0]) if self.entries else self.column_count

    @property
    def shape(self) -> tuple[int, int]:
        """(rows, columns)"""
        return (self.rows, self.columns)

    @property
    def length(self) -> int:
        """Number of elements."""
        return self.rows * self.columns

    @property
    def is_square(self) -> bool:
        return self.rows == self.columns

    # Element access

    def _check_index(self, i: Any, j: Any) -> tuple[int, int]:
        for index in (i, j):
            if isinstance(index, (bool, np.bool_)) or not isinstance(index, (int, np.integer)):
                raise TypeError(f"Matrix indices must be integers, got {type(index).__name__}")
        if not (0 <= i < self.rows and 0 <= j < self.columns):
            raise OutOfRangeError((int(i), int(j)), self.shape)
        return int(i), int(j)

    def __getitem__(self, index: tuple[int, int] | int) -> Any:
        """Element at (i, j), or a copy of row i."""
        if isinstance(index, tuple):
            i, j = self._check_index(*index)
            return self.entries[i][j]
        if not isinstance(index, (int, np.integer)) or isinstance(index, (bool, np.bool_)):
            raise TypeError(f"Matrix indices must be integers, got {type(index).__name__}")
        if not 0 <= index < self.rows:
            raise OutOfRangeError(int(index), (0, self.rows))
        return list(self.entries[index])

    def __setitem__(self, index: tuple[int, int], value: Any) -> None:
        if not isinstance(index, tuple):
            raise TypeError("Matrix assignment requires an (i, j) index")
        i, j = self._check_index(*index)
        self.entries[i][j] = self.scalar_field.coerce(value)

    def __iter__(self) -> Iterator[list[Any]]:
        """Iterate over copies of the rows."""
        return iter([list(row) for row in self.entries])

    # Comparison

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, BaseMatrix):
            return NotImplemented
        return self._same_kind(other) and self.shape == other.shape and self.entries == other.entries

    def __ne__(self, other: Any) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    def compare(self, other: Any, tolerance: float | None = None, mode: str | None = None) -> bool:
        """Compare matrices element-wise within tolerance."""
        if not self._same_kind(other) or self.shape != other.shape:
            return False
        tolerance, mode = self._comparison_defaults(tolerance, mode)
        for row1, row2 in zip(self.entries, other.entries):
            for el1, el2 in zip(row1, row2):
                if not fuzzy_compare(el1, el2, tolerance, mode):
                    return False
        return True

    # Output formats

    def to_string(self) -> str:
        """Rows of tab-terminated elements, one line each; "[ ]" when empty."""
        if self.length == 0:
            return "[ ]"
        fmt = self.scalar_field.format
        return "".join("".join(f"{fmt(el)}\t" for el in row) + "\n" for row in self.entries)

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.entries!r})"

    def to_tex(self) -> str:
        """Convert to LaTeX (pmatrix)."""
        fmt = self.scalar_field.format
        rows_tex = " \\\\ ".join(" & ".join(fmt(el) for el in row) for row in self.entries)
        return f"\\begin{{pmatrix}} {rows_tex} \\end{{pmatrix}}"

    # Copies and conversions

    def clone(self):
        """Independent deep copy."""
        return self._with_entries([list(row) for row in self.entries], self.columns)

    def copy(self):
        return self.clone()

    def __copy__(self):
        return self.clone()

    def __deepcopy__(self, memo: dict | None = None):
        return self.clone()

    def to_python(self) -> list[list[Any]]:
        """Convert to a nested list of Python numbers."""
        return [list(row) for row in self.entries]

    def to_array(self) -> list[list[Any]]:
        """Copy of the entries; the canonical interchange form."""
        return [list(row) for row in self.entries]

    def to_numpy(self) -> np.ndarray:
        """Convert to NumPy array."""
        if not self.entries:
            return np.zeros((0, self.columns))
        return np.array(self.to_python())

    def to_square_matrix(self):
        """
        Same entries as the square kind of this field.

        Raises:
            InvalidCastError: If rows != columns
        """
        _, square = _kinds(self.scalar_field)
        if not self.is_square:
            raise InvalidCastError(self.__class__.__name__, square.__name__, self.shape)
        return self._with_entries(self.to_array(), self.columns, square)

    def to_matrix(self):
        """Same entries as the rectangular kind of this field."""
        general, _ = _kinds(self.scalar_field)
        return self._with_entries(self.to_array(), self.columns, general)

    # In-place helpers

    def fill(self, value: Any) -> None:
        element = self.scalar_field.coerce(value)
        for row in self.entries:
            for j in range(len(row)):
                row[j] = element

    def clear(self) -> None:
        self.fill(self.scalar_field.zero)

    # Matrix operations

    def _require_square(self, operation: str) -> None:
        if not self.is_square:
            raise StructuralError(
                f"{operation} only defined for square matrices, got {self.rows}x{self.columns}",
                details={"operation": operation, "shape": self.shape},
            )

    def transpose(self):
        """New columns x rows matrix with [i, j] = self[j, i]."""
        transposed = [[self.entries[i][j] for i in range(self.rows)] for j in range(self.columns)]
        return self._with_entries(transposed, self.rows)

    @property
    def determinant(self) -> Any:
        """
        Determinant by cofactor expansion, recomputed on each access.

        Non-square and empty matrices yield the field's zero rather than
        raising.
        """
        return laplace.determinant(self.entries, self.scalar_field, self.columns)

    def minor(self, i: int, j: int):
        """
        Matrix with row i and column j removed.

        Raises:
            StructuralError: If the matrix is not square
            OutOfRangeError: If i or j is out of range
        """
        self._require_square("Minor")
        return self._with_entries(laplace.minor(self.entries, i, j), max(self.columns - 1, 0))

    def cofactor(self, i: int, j: int) -> Any:
        """(-1)^(i+j) * det(minor(i, j))"""
        self._require_square("Cofactor")
        return laplace.cofactor(self.entries, i, j, self.scalar_field)

    def adjugate(self):
        """Transpose of the cofactor matrix."""
        self._require_square("Adjugate")
        return self._with_entries(laplace.adjugate(self.entries, self.scalar_field), self.columns)

    def inverse(self):
        """
        Inverse via the adjugate: adj(M) / det(M).

        Raises:
            StructuralError: If the matrix is not square
            SingularMatrixError: If the determinant is zero
        """
        self._require_square("Inverse")
        det = self.determinant
        if det == self.scalar_field.zero:
            raise SingularMatrixError(self.rows)

        logger.debug("Inverting %dx%d %s", self.rows, self.columns, self.__class__.__name__)
        factor = self.scalar_field.one / det
        adjugate = laplace.adjugate(self.entries, self.scalar_field)
        return self._with_entries([[factor * el for el in row] for row in adjugate], self.columns)

    def trace(self) -> Any:
        """Sum of diagonal elements."""
        self._require_square("Trace")
        total = self.scalar_field.zero
        for i in range(self.rows):
            total += self.entries[i][i]
        return total

    # Arithmetic operators

    def _elementwise(self, other: BaseMatrix, operation: str):
        if self.shape != other.shape:
            raise DimensionMismatchError(operation, self.shape, other.shape)
        combine = (lambda a, b: a + b) if operation == "+" else (lambda a, b: a - b)
        result = [
            [combine(el1, el2) for el1, el2 in zip(row1, row2)]
            for row1, row2 in zip(self.entries, other.entries)
        ]
        general, square = _kinds(self.scalar_field)
        kind = square if (self.is_square_kind or other.is_square_kind) else general
        return self._with_entries(result, self.columns, kind)

    def _matmul(self, other: BaseMatrix):
        if self.columns != other.rows:
            raise DimensionMismatchError("*", self.shape, other.shape)
        zero = self.scalar_field.zero
        result = []
        for i in range(self.rows):
            row = []
            for j in range(other.columns):
                total = zero
                for k in range(self.columns):
                    total += self.entries[i][k] * other.entries[k][j]
                row.append(total)
            result.append(row)
        general, square = _kinds(self.scalar_field)
        kind = square if (self.is_square_kind and other.is_square_kind) else general
        return self._with_entries(result, other.columns, kind)

    def _matvec(self, vector: BaseVector):
        if self.columns != len(vector):
            raise DimensionMismatchError("*", self.shape, len(vector))
        result = []
        for row in self.entries:
            total = self.scalar_field.zero
            for el, comp in zip(row, vector.components):
                total += el * comp
            result.append(total)
        return self.vector_class(result)

    def __add__(self, other: Any):
        """Matrix addition."""
        if not self._same_kind(other):
            return NotImplemented
        return self._elementwise(other, "+")

    def __sub__(self, other: Any):
        """Matrix subtraction."""
        if not self._same_kind(other):
            return NotImplemented
        return self._elementwise(other, "-")

    def __mul__(self, other: Any):
        """Matrix, vector or scalar multiplication."""
        if self._same_kind(other):
            return self._matmul(other)
        if isinstance(other, BaseVector) and other.scalar_field is self.scalar_field:
            return self._matvec(other)
        scalar = self._as_scalar(other)
        if scalar is None:
            return NotImplemented
        return self._with_entries([[scalar * el for el in row] for row in self.entries], self.columns)

    def __rmul__(self, other: Any):
        """Right multiplication (scalar only)."""
        scalar = self._as_scalar(other)
        if scalar is None:
            return NotImplemented
        return self._with_entries([[scalar * el for el in row] for row in self.entries], self.columns)

    def __matmul__(self, other: Any):
        if self._same_kind(other):
            return self._matmul(other)
        if isinstance(other, BaseVector) and other.scalar_field is self.scalar_field:
            return self._matvec(other)
        return NotImplemented

    def __truediv__(self, other: Any):
        """Scalar division."""
        scalar = self._as_scalar(other)
        if scalar is None:
            return NotImplemented
        if scalar == self.scalar_field.zero:
            raise ZeroDivisionError("Matrix division by zero")
        return self._with_entries([[el / scalar for el in row] for row in self.entries], self.columns)

    def __pow__(self, other: Any):
        """Matrix power (positive integer powers only)."""
        if not _is_int(other):
            return NotImplemented
        return matrix_power(self, int(other))

    def __neg__(self):
        return self._with_entries([[-el for el in row] for row in self.entries], self.columns)

    def __pos__(self):
        return self.clone()

    def __abs__(self) -> Any:
        """Absolute value not well-defined for matrices."""
        raise TypeError("Absolute value not defined for matrices (use determinant)")


class _SquareKind:
    """Shape rules shared by the square kinds."""

    is_square_kind = True

    @classmethod
    def _from_dimension(cls, dim: int) -> tuple[list[list[Any]], int]:
        return cls._zeros(dim, dim)

    @classmethod
    def _check_shape(cls, rows: int, columns: int) -> None:
        if rows != columns:
            raise StructuralError(
                f"{cls.__name__} requires equal rows and columns, got {rows}x{columns}",
                details={"rows": rows, "columns": columns},
            )

    @property
    def dim(self) -> int:
        return self.rows


class Matrix(BaseMatrix):
    """
    Rectangular matrix of real scalars.

    Examples:
        >>> Matrix(2, 3).shape
        (2, 3)
        >>> Matrix([[1, 2], [3, 4]]).determinant
        -2
    """


class SquareMatrix(_SquareKind, Matrix):
    """N x N matrix of real scalars; SquareMatrix(dim) or SquareMatrix(rows)."""


class ComplexMatrix(BaseMatrix):
    """Rectangular matrix of Complex scalars."""

    scalar_field: ClassVar[ScalarField] = COMPLEX
    vector_class: ClassVar[type[BaseVector]] = ComplexVector

    def to_python(self) -> list[list[complex]]:
        return [[el.to_python() for el in row] for row in self.entries]

    def to_numpy(self) -> np.ndarray:
        if not self.entries:
            return np.zeros((0, self.columns), dtype=complex)
        return np.array(self.to_python(), dtype=complex)


class SquareComplexMatrix(_SquareKind, ComplexMatrix):
    """N x N matrix of Complex scalars."""


_KINDS: dict[ScalarField, tuple[type[BaseMatrix], type[BaseMatrix]]] = {
    REAL: (Matrix, SquareMatrix),
    COMPLEX: (ComplexMatrix, SquareComplexMatrix),
}


def _kinds(field: ScalarField) -> tuple[type[BaseMatrix], type[BaseMatrix]]:
    """(rectangular kind, square kind) for a scalar field."""
    return _KINDS[field]


def _is_int(value: Any) -> bool:
    return isinstance(value, (int, np.integer)) and not isinstance(value, (bool, np.bool_))


# Standalone functions

def matrix_power(matrix: BaseMatrix, degree: int):
    """
    Raise a square matrix to a positive integer power by repeated multiplication.

    Raises:
        TypeError: If degree is not an integer
        RangeError: If degree < 1
        StructuralError: If the matrix is not square
    """
    if not _is_int(degree):
        raise TypeError(f"Matrix power requires an integer degree, got {type(degree).__name__}")
    if degree < 1:
        raise RangeError(f"Matrix power requires degree >= 1, got {degree}", details={"degree": degree})
    matrix._require_square("Matrix power")

    result = matrix.clone()
    for _ in range(int(degree) - 1):
        result = result._matmul(matrix)
    return result


def identity(dim: int, kind: type[BaseMatrix] = SquareMatrix):
    """dim x dim identity matrix of the given kind."""
    result = kind(dim, dim)
    for i in range(dim):
        result[i, i] = kind.scalar_field.one
    return result
