"""
Scalar fields: the element kinds the containers are generic over.

A field knows its additive and multiplicative identities, how to recognise
and coerce element values, how to parse and format them, and whether its
values are totally ordered. Arithmetic itself is carried by the element
values' own operators.
"""

from __future__ import annotations

import numbers
from abc import ABC, abstractmethod
from fractions import Fraction
from typing import Any

import numpy as np

from .numeric import Complex


class ScalarField(ABC):
    """
    Capabilities of a scalar kind.

    Attributes:
        name: Short name used in messages
        ordered: Whether values support a total order (sort, binary search)
    """

    name: str = "scalar"
    ordered: bool = False

    @property
    @abstractmethod
    def zero(self) -> Any:
        """Additive identity."""

    @property
    @abstractmethod
    def one(self) -> Any:
        """Multiplicative identity."""

    @abstractmethod
    def is_scalar(self, value: Any) -> bool:
        """Whether value can be stored without conversion."""

    @abstractmethod
    def coerce(self, value: Any) -> Any:
        """
        Convert value to an element of this field.

        Raises:
            TypeError: If value is not a scalar of this field
        """

    @abstractmethod
    def parse(self, text: str) -> Any:
        """Parse a textual scalar."""

    def format(self, value: Any) -> str:
        """Render a scalar for diagnostics."""
        return str(value)

    @abstractmethod
    def magnitude_squared(self, value: Any) -> float:
        """|value|^2 as a float."""

    @abstractmethod
    def to_real(self, value: Any) -> float:
        """
        Interpret value as a real number.

        Raises:
            TypeError: If value has a non-zero imaginary part
        """

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}()"


class RealField(ScalarField):
    """
    Ordered real numbers: int, float, Fraction and numpy reals.

    Decimal is not a numbers.Real and is rejected.

    Values keep their own type, so integer and rational containers stay
    exact under +, -, * and determinant computation.
    """

    name = "real"
    ordered = True

    @property
    def zero(self) -> int:
        return 0

    @property
    def one(self) -> int:
        return 1

    def is_scalar(self, value: Any) -> bool:
        if isinstance(value, (bool, np.bool_)):
            return False
        return isinstance(value, numbers.Real)

    def coerce(self, value: Any) -> Any:
        if not self.is_scalar(value):
            raise TypeError(f"Expected a real scalar, got {type(value).__name__}")
        if isinstance(value, np.generic):
            # numpy scalars become the equivalent Python number
            return value.item()
        return value

    def parse(self, text: str) -> Any:
        literal = text.strip()
        try:
            return int(literal)
        except ValueError:
            pass
        if '/' in literal:
            return Fraction(literal)
        return float(literal)

    def magnitude_squared(self, value: Any) -> float:
        return float(value) ** 2

    def to_real(self, value: Any) -> float:
        return float(value)


class ComplexField(ScalarField):
    """Complex numbers as Complex(real, imag); not ordered."""

    name = "complex"
    ordered = False

    @property
    def zero(self) -> Complex:
        return Complex(0.0, 0.0)

    @property
    def one(self) -> Complex:
        return Complex(1.0, 0.0)

    def is_scalar(self, value: Any) -> bool:
        return isinstance(value, Complex)

    def coerce(self, value: Any) -> Complex:
        if isinstance(value, Complex):
            return value
        if isinstance(value, (bool, np.bool_)):
            raise TypeError("bool is not a complex scalar")
        if isinstance(value, np.generic):
            value = value.item()
        if isinstance(value, numbers.Number):
            return Complex(complex(value))
        if isinstance(value, str):
            try:
                return self.parse(value)
            except ValueError as exc:
                raise TypeError(str(exc)) from exc
        if isinstance(value, (tuple, list, dict)):
            try:
                return Complex.from_value(value)
            except ValueError as exc:
                raise TypeError(str(exc)) from exc
        raise TypeError(f"Expected a complex scalar, got {type(value).__name__}")

    def parse(self, text: str) -> Complex:
        return Complex(text)

    def magnitude_squared(self, value: Any) -> float:
        c = self.coerce(value)
        return c.real * c.real + c.imag * c.imag

    def to_real(self, value: Any) -> float:
        c = self.coerce(value)
        if c.imag != 0:
            raise TypeError(f"Cannot interpret {c} as a real number")
        return c.real


REAL = RealField()
COMPLEX = ComplexField()
