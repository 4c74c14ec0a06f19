"""
Complex scalar type and fuzzy comparison of numbers.

Complex is the element type of the complex-valued containers. It has no
total order, so the ordering operators raise TypeError.
"""

from __future__ import annotations

import math
import re
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from .value import ToleranceMode

_COMPLEX_LITERAL = re.compile(
    r'^([+-]?\d+(?:\.\d+)?(?:[eE][+-]?\d+)?)([+-])(\d+(?:\.\d+)?(?:[eE][+-]?\d+)?)?[ij]$'
)
_IMAGINARY_LITERAL = re.compile(r'^([+-]?)(\d+(?:\.\d+)?(?:[eE][+-]?\d+)?)?[ij]$')


class Complex(BaseModel):
    """
    Complex number value.

    Represents numbers with real and imaginary parts. Instances are
    immutable and hash like the builtin complex.
    """

    model_config = ConfigDict(frozen=True)

    real: float = Field(default=0.0, description="The real part")
    imag: float = Field(default=0.0, description="The imaginary part")

    def __init__(
        self,
        real: float | int | complex | list | tuple | str | Complex = 0.0,
        imag: float | int = 0.0,
        **kwargs: Any,
    ):
        """
        Initialize a Complex number.

        Args:
            real: Real part, or a builtin complex, a [real, imag] pair,
                another Complex or a string like "2-4i"
            imag: Imaginary part (default 0)
        """
        if isinstance(real, Complex):
            real_part, imag_part = real.real, real.imag
        elif isinstance(real, complex):
            real_part, imag_part = real.real, real.imag
        elif isinstance(real, (list, tuple)):
            if len(real) > 2:
                raise ValueError(f"Complex expects at most two parts, got {len(real)}")
            parts = [float(part) for part in real] + [0.0, 0.0]
            real_part, imag_part = parts[0], parts[1]
        elif isinstance(real, str):
            real_part, imag_part = self._parse_literal(real)
        else:
            real_part = float(real)
            imag_part = float(imag)

        super().__init__(real=real_part, imag=imag_part, **kwargs)

    @staticmethod
    def _parse_literal(text: str) -> tuple[float, float]:
        """Parse strings like "2-4i", "3i", "-i" or "1.5"."""
        literal = text.replace(' ', '')
        match = _COMPLEX_LITERAL.match(literal)
        if match:
            imag_part = float(match.group(3)) if match.group(3) else 1.0
            if match.group(2) == '-':
                imag_part = -imag_part
            return float(match.group(1)), imag_part

        match = _IMAGINARY_LITERAL.match(literal)
        if match:
            imag_part = float(match.group(2)) if match.group(2) else 1.0
            return 0.0, -imag_part if match.group(1) == '-' else imag_part

        try:
            return float(literal), 0.0
        except ValueError:
            raise ValueError(f"Cannot parse complex number from string: {text}")

    @classmethod
    def from_value(cls, value: Any) -> Complex:
        """Build a Complex from any supported number or literal."""
        if isinstance(value, Complex):
            return value
        if isinstance(value, dict):
            return cls(value.get("real", 0.0), value.get("imag", 0.0))
        if isinstance(value, bool):
            raise TypeError("bool is not a numeric scalar")
        return cls(value)

    def to_string(self) -> str:
        """Convert to string."""
        if self.imag == 0:
            return _format_part(self.real)
        if self.real == 0:
            if self.imag == 1:
                return "i"
            if self.imag == -1:
                return "-i"
            return f"{_format_part(self.imag)}i"

        imag_str = "" if abs(self.imag) == 1 else _format_part(abs(self.imag))
        sign = "+" if self.imag > 0 else "-"
        return f"{_format_part(self.real)} {sign} {imag_str}i"

    def to_tex(self) -> str:
        return self.to_string()

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"Complex({self.real!r}, {self.imag!r})"

    def to_python(self) -> complex:
        """Convert to Python complex."""
        return complex(self.real, self.imag)

    def __complex__(self) -> complex:
        return self.to_python()

    def conjugate(self) -> Complex:
        return Complex(self.real, -self.imag)

    # Equality and hashing

    def __eq__(self, other: Any) -> bool:
        if isinstance(other, Complex):
            return self.real == other.real and self.imag == other.imag
        if isinstance(other, (int, float, complex)) and not isinstance(other, bool):
            return complex(self.real, self.imag) == other
        return NotImplemented

    def __ne__(self, other: Any) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    def __hash__(self) -> int:
        return hash(complex(self.real, self.imag))

    def __lt__(self, other: Any) -> bool:
        raise TypeError("Complex numbers have no total order")

    __le__ = __lt__
    __gt__ = __lt__
    __ge__ = __lt__

    # Arithmetic operators

    @staticmethod
    def _as_parts(other: Any) -> tuple[float, float] | None:
        """Split a supported operand into (real, imag), None when unsupported."""
        if isinstance(other, Complex):
            return other.real, other.imag
        if isinstance(other, bool):
            return None
        if isinstance(other, complex):
            return other.real, other.imag
        if isinstance(other, (int, float)):
            return float(other), 0.0
        return None

    def __add__(self, other: Any) -> Complex:
        parts = self._as_parts(other)
        if parts is None:
            return NotImplemented
        return Complex(self.real + parts[0], self.imag + parts[1])

    def __radd__(self, other: Any) -> Complex:
        return self.__add__(other)

    def __sub__(self, other: Any) -> Complex:
        parts = self._as_parts(other)
        if parts is None:
            return NotImplemented
        return Complex(self.real - parts[0], self.imag - parts[1])

    def __rsub__(self, other: Any) -> Complex:
        parts = self._as_parts(other)
        if parts is None:
            return NotImplemented
        return Complex(parts[0] - self.real, parts[1] - self.imag)

    def __mul__(self, other: Any) -> Complex:
        parts = self._as_parts(other)
        if parts is None:
            return NotImplemented
        c, d = parts
        # (a + bi)(c + di) = (ac - bd) + (ad + bc)i
        return Complex(self.real * c - self.imag * d, self.real * d + self.imag * c)

    def __rmul__(self, other: Any) -> Complex:
        return self.__mul__(other)

    def __truediv__(self, other: Any) -> Complex:
        parts = self._as_parts(other)
        if parts is None:
            return NotImplemented
        c, d = parts
        # (a + bi) / (c + di) = [(a + bi)(c - di)] / (c^2 + d^2)
        denom = c**2 + d**2
        if denom == 0:
            raise ZeroDivisionError("Complex division by zero")
        real_part = (self.real * c + self.imag * d) / denom
        imag_part = (self.imag * c - self.real * d) / denom
        return Complex(real_part, imag_part)

    def __rtruediv__(self, other: Any) -> Complex:
        parts = self._as_parts(other)
        if parts is None:
            return NotImplemented
        return Complex(*parts) / self

    def __pow__(self, other: Any) -> Complex:
        parts = self._as_parts(other)
        if parts is None:
            return NotImplemented
        result = complex(self.real, self.imag) ** complex(*parts)
        return Complex(result.real, result.imag)

    def __neg__(self) -> Complex:
        return Complex(-self.real, -self.imag)

    def __pos__(self) -> Complex:
        return Complex(self.real, self.imag)

    def __abs__(self) -> float:
        """Magnitude."""
        return math.hypot(self.real, self.imag)

    def norm(self) -> float:
        """Same as abs()."""
        return self.__abs__()


def _format_part(value: float) -> str:
    """Render a float without a trailing .0 for integral values."""
    if math.isfinite(value) and value == int(value) and abs(value) < 1e15:
        return str(int(value))
    return repr(value)


def fuzzy_compare(a: Any, b: Any, tolerance: float, mode: str) -> bool:
    """
    Compare two numbers with tolerance.

    Complex operands are compared part by part.

    Args:
        a: First value
        b: Second value
        tolerance: Tolerance value
        mode: Comparison mode (relative, absolute, sigfigs)

    Returns:
        True if values are equal within tolerance
    """
    if isinstance(a, (Complex, complex)) or isinstance(b, (Complex, complex)):
        ca, cb = complex(a), complex(b)
        return (
            fuzzy_compare(ca.real, cb.real, tolerance, mode)
            and fuzzy_compare(ca.imag, cb.imag, tolerance, mode)
        )

    a, b = float(a), float(b)

    if a == b:
        return True

    # Use epsilon for floating point comparisons to avoid precision issues
    EPSILON = 1e-12

    if mode == ToleranceMode.ABSOLUTE:
        return abs(a - b) <= tolerance + EPSILON

    elif mode == ToleranceMode.RELATIVE:
        # abs(a-b) / max(abs(a), abs(b)) <= tolerance
        max_abs = max(abs(a), abs(b))
        if max_abs == 0:
            return abs(a - b) <= tolerance + EPSILON
        return abs(a - b) / max_abs <= tolerance + EPSILON

    elif mode == ToleranceMode.SIGFIGS:
        diff = abs(a - b)
        avg = (abs(a) + abs(b)) / 2
        if avg == 0:
            return diff < 10 ** (-tolerance)
        return math.floor(math.log10(diff / avg)) < -tolerance

    else:
        raise ValueError(f"Unknown tolerance mode: {mode}")
