"""
Dense vectors: Vector (real scalars) and ComplexVector.

Both are instances of one generic engine, BaseVector, parameterized by a
ScalarField. Vectors own their storage: construction, clone() and every
operator copy the elements, so two vectors never share a backing list.
Order-dependent utilities (sort, binary search, sign counts) exist only on
Vector because complex numbers are not ordered.
"""

from __future__ import annotations

import math
import numbers
from bisect import bisect_left
from typing import Any, Callable, ClassVar, Iterable, Iterator, Optional

import numpy as np
from pydantic import BaseModel, ConfigDict, Field, field_validator

from .core.errors import DimensionMismatchError, OutOfRangeError, RangeError, StructuralError
from .numeric import Complex, fuzzy_compare
from .scalar import COMPLEX, REAL, ScalarField
from .value import LinearValue

Predicate = Callable[[Any], bool]


class BaseVector(BaseModel, LinearValue):
    """
    Fixed-length mutable sequence of scalars.

    Construct from a length (zero-filled) or from any iterable, numpy array
    or other vector (copied). The length never changes after construction;
    resize() returns a new vector.
    """

    model_config = ConfigDict(arbitrary_types_allowed=True, validate_assignment=True)

    scalar_field: ClassVar[ScalarField] = REAL

    # numpy defers binary operators to the vector's reflected methods
    __array_ufunc__ = None

    # Length is fixed after construction
    components: list[Any] = Field(default_factory=list, frozen=True)

    def __init__(
        self,
        values: int | Iterable[Any] | np.ndarray | None = None,
        *,
        components: Iterable[Any] | None = None,
        **kwargs: Any,
    ) -> None:
        if components is not None and values is not None:
            raise ValueError(f"{self.__class__.__name__} accepts either values or components, not both")

        if components is not None:
            source: Any = components
        elif values is None:
            source = []
        elif isinstance(values, (int, np.integer)) and not isinstance(values, (bool, np.bool_)):
            if values < 0:
                raise RangeError(f"Vector length must be non-negative, got {values}", details={"length": int(values)})
            source = [self.scalar_field.zero] * int(values)
        else:
            source = values

        super().__init__(components=self._coerce_components(source), **kwargs)

    @classmethod
    def _coerce_components(cls, raw: Any) -> list[Any]:
        """Copy raw values into a new list of field elements."""
        if isinstance(raw, BaseVector):
            raw = raw.components
        if isinstance(raw, np.ndarray):
            if raw.ndim != 1:
                raise StructuralError(
                    f"Vector requires a one-dimensional array, got shape {raw.shape}",
                    details={"shape": raw.shape},
                )
            raw = raw.tolist()
        if isinstance(raw, (str, bytes)) or not isinstance(raw, Iterable):
            raise TypeError(f"{cls.__name__} values must be an iterable of scalars or a length")
        return [cls.scalar_field.coerce(value) for value in raw]

    @field_validator("components", mode="before")
    @classmethod
    def _validate_components(cls, value):
        if value is None:
            return []
        return cls._coerce_components(value)

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
        return isinstance(other, BaseVector) and other.scalar_field is self.scalar_field

    # Size and element access

    @property
    def length(self) -> int:
        return len(self.components)

    def __len__(self) -> int:
        return len(self.components)

    def __iter__(self) -> Iterator[Any]:
        return iter(list(self.components))

    def _check_index(self, index: Any) -> int:
        if isinstance(index, (bool, np.bool_)) or not isinstance(index, (int, np.integer)):
            raise TypeError(f"Vector indices must be integers, got {type(index).__name__}")
        if not 0 <= index < len(self.components):
            raise OutOfRangeError(int(index), (0, len(self.components)))
        return int(index)

    def __getitem__(self, index: int) -> Any:
        return self.components[self._check_index(index)]

    def __setitem__(self, index: int, value: Any) -> None:
        self.components[self._check_index(index)] = self.scalar_field.coerce(value)

    # Comparison

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, BaseVector):
            return NotImplemented
        return self._same_kind(other) and self.components == other.components

    def __ne__(self, other: Any) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    def compare(self, other: Any, tolerance: float | None = None, mode: str | None = None) -> bool:
        """Compare vectors component-wise within tolerance."""
        if not self._same_kind(other) or len(self) != len(other):
            return False
        tolerance, mode = self._comparison_defaults(tolerance, mode)
        return all(
            fuzzy_compare(a, b, tolerance, mode) for a, b in zip(self.components, other.components)
        )

    # Output formats

    def to_string(self) -> str:
        """Tab separated elements in brackets; "[ ]" when empty."""
        if not self.components:
            return "[ ]"
        return "[" + "\t".join(self.scalar_field.format(c) for c in self.components) + "]"

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.components!r})"

    def to_tex(self) -> str:
        comps_str = ", ".join(self.scalar_field.format(c) for c in self.components)
        return f"\\left\\langle {comps_str} \\right\\rangle"

    # Copies and conversions

    def clone(self):
        """Independent deep copy."""
        return self.__class__(self.components)

    def copy(self):
        return self.clone()

    def __copy__(self):
        return self.clone()

    def __deepcopy__(self, memo: dict | None = None):
        return self.clone()

    def to_python(self) -> list[Any]:
        """Convert to a list of Python numbers."""
        return list(self.components)

    def to_list(self) -> list[Any]:
        return list(self.components)

    def to_array(self) -> list[Any]:
        """Copy of the elements; the canonical interchange form."""
        return list(self.components)

    def to_tuple(self) -> tuple[Any, ...]:
        return tuple(self.components)

    def to_set(self) -> set[Any]:
        return set(self.components)

    def to_numpy(self) -> np.ndarray:
        """Convert to NumPy array."""
        return np.array(self.to_python())

    def copy_to(self, target: list[Any], index: int = 0) -> None:
        """Write all elements into target starting at index."""
        self.copy_range(0, target, index, len(self.components))

    def copy_range(self, index: int, target: list[Any], target_index: int, count: int) -> None:
        """Write count elements starting at index into target starting at target_index."""
        if count < 0 or index < 0 or target_index < 0:
            raise RangeError(
                "copy_range arguments must be non-negative",
                details={"index": index, "target_index": target_index, "count": count},
            )
        if index + count > len(self.components) or target_index + count > len(target):
            raise RangeError(
                f"Cannot copy {count} elements from index {index} to index {target_index}",
                details={"source_length": len(self.components), "target_length": len(target)},
            )
        target[target_index:target_index + count] = self.components[index:index + count]

    # In-place helpers

    def fill(self, value: Any) -> None:
        """Set every element to value."""
        element = self.scalar_field.coerce(value)
        for i in range(len(self.components)):
            self.components[i] = element

    def clear(self) -> None:
        """Set every element to zero."""
        self.fill(self.scalar_field.zero)

    def resized(self, new_length: int):
        """
        Copy with a new length.

        Keeps the first min(old, new) elements and pads with zero.
        """
        if new_length < 0:
            raise RangeError(f"Vector length must be non-negative, got {new_length}", details={"length": new_length})
        kept = self.components[:new_length]
        return self.__class__(kept + [self.scalar_field.zero] * (new_length - len(kept)))

    # Searching

    def exists(self, match: Predicate) -> bool:
        return any(match(c) for c in self.components)

    def find(self, match: Predicate) -> Optional[Any]:
        """First element satisfying match, or None."""
        return next((c for c in self.components if match(c)), None)

    def find_last(self, match: Predicate) -> Optional[Any]:
        return next((c for c in reversed(self.components) if match(c)), None)

    def find_index(self, match: Predicate) -> int:
        """Index of the first element satisfying match, or -1."""
        return next((i for i, c in enumerate(self.components) if match(c)), -1)

    def find_last_index(self, match: Predicate) -> int:
        for i in range(len(self.components) - 1, -1, -1):
            if match(self.components[i]):
                return i
        return -1

    def find_all(self, match: Predicate):
        """Vector of every element satisfying match."""
        return self.__class__([c for c in self.components if match(c)])

    def index_of(self, value: Any) -> int:
        return self.find_index(lambda c: c == value)

    def last_index_of(self, value: Any) -> int:
        return self.find_last_index(lambda c: c == value)

    # Vector operations

    def dot(self, other: BaseVector) -> Any:
        """
        Scalar product sum(a[i] * b[i]).

        Complex vectors are not conjugated.

        Raises:
            RangeError: If lengths differ
        """
        if not self._same_kind(other):
            raise TypeError(f"Cannot take dot product of {self.__class__.__name__} and {type(other).__name__}")
        if len(self.components) != len(other.components):
            raise RangeError(
                f"Dot product requires equal lengths, got {len(self)} and {len(other)}",
                details={"left": len(self), "right": len(other)},
            )
        result = self.scalar_field.zero
        for a, b in zip(self.components, other.components):
            result += a * b
        return result

    def norm(self) -> float:
        """Euclidean norm sqrt(v * v) as a float."""
        return math.sqrt(self.scalar_field.to_real(self.dot(self)))

    # Arithmetic operators

    def __add__(self, other: Any):
        """Vector addition."""
        if not self._same_kind(other):
            return NotImplemented
        if len(self.components) != len(other.components):
            raise DimensionMismatchError("+", len(self), len(other))
        return self.__class__([a + b for a, b in zip(self.components, other.components)])

    def __sub__(self, other: Any):
        """Vector subtraction."""
        if not self._same_kind(other):
            return NotImplemented
        if len(self.components) != len(other.components):
            raise DimensionMismatchError("-", len(self), len(other))
        return self.__class__([a - b for a, b in zip(self.components, other.components)])

    def __mul__(self, other: Any):
        """Dot product with a vector, or scaling by a scalar."""
        if self._same_kind(other):
            return self.dot(other)
        scalar = self._as_scalar(other)
        if scalar is None:
            return NotImplemented
        return self.__class__([scalar * c for c in self.components])

    def __rmul__(self, other: Any):
        """Right scalar multiplication."""
        scalar = self._as_scalar(other)
        if scalar is None:
            return NotImplemented
        return self.__class__([scalar * c for c in self.components])

    def __truediv__(self, other: Any):
        """Scalar division."""
        scalar = self._as_scalar(other)
        if scalar is None:
            return NotImplemented
        if scalar == self.scalar_field.zero:
            raise ZeroDivisionError("Vector division by zero")
        return self.__class__([c / scalar for c in self.components])

    def __neg__(self):
        return self.__class__([-c for c in self.components])

    def __pos__(self):
        return self.clone()

    def __abs__(self) -> float:
        """Magnitude (norm)."""
        return self.norm()


class Vector(BaseVector):
    """
    Vector of real scalars.

    Elements keep their numeric type (int, float, Fraction), so
    integer vectors stay exact under addition, subtraction and dot product.
    """

    scalar_field: ClassVar[ScalarField] = REAL

    @property
    def positive_count(self) -> int:
        return sum(1 for c in self.components if c > 0)

    @property
    def negative_count(self) -> int:
        return sum(1 for c in self.components if c < 0)

    def sort(self) -> None:
        """Sort ascending in place."""
        self.components.sort()

    def binary_search(self, value: Any) -> int:
        """
        Locate value in a vector sorted ascending.

        Returns:
            The index of value when present, otherwise the bitwise complement
            (~i, always negative) of the index where it would be inserted.
            The result is unspecified when the vector is not sorted.
        """
        target = self.scalar_field.coerce(value)
        position = bisect_left(self.components, target)
        if position < len(self.components) and self.components[position] == target:
            return position
        return ~position


class ComplexVector(BaseVector):
    """Vector of Complex scalars; no ordering utilities."""

    scalar_field: ClassVar[ScalarField] = COMPLEX

    def norm(self) -> float:
        """sqrt(sum(re^2 + im^2)), computed directly rather than through the dot product."""
        return math.sqrt(sum(self.scalar_field.magnitude_squared(c) for c in self.components))

    def to_python(self) -> list[complex]:
        return [c.to_python() for c in self.components]

    def to_numpy(self) -> np.ndarray:
        return np.array(self.to_python(), dtype=complex)


# Standalone functions

def dot(left: BaseVector, right: BaseVector) -> Any:
    """Scalar product of two vectors of the same kind."""
    return left.dot(right)


def resize(vector: BaseVector, new_length: int) -> BaseVector:
    """Return a copy of vector with new_length elements (zero padded or truncated)."""
    return vector.resized(new_length)


def norm(obj: Any) -> float:
    """
    Euclidean norm of a vector or point.

    Examples:
        >>> norm(Vector([3, 4]))
        5.0
    """
    from .point import Point

    if isinstance(obj, (BaseVector, Point)):
        return obj.norm()
    raise TypeError(f"norm() requires a vector or Point, got {type(obj).__name__}")
